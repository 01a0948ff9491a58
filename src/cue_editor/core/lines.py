"""Buffered, forward-only line reading for CUE sheet text"""


class LineSource:
    """
    Yields the non-blank lines of a text stream, stripped, one at a time.

    The stream is consumed lazily: only the current line is held, so the
    parser can hand the same source from one state to the next.
    """

    def __init__(self, stream):
        """
        Args:
            stream: Any iterable of text lines (open text file, StringIO, list)
        """
        self._lines = iter(stream)

    def next_line(self):
        """
        Read the next meaningful line.

        Returns:
            The stripped line, or None once the stream is exhausted
        """
        for line in self._lines:
            line = line.strip()
            if line:
                return line
        return None

    def __iter__(self):
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line
