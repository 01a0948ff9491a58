"""CUE sheet parsing, track insertion and serialization"""
from . import meta_keys
from .exceptions import CueError, CueFormatError
from .fields import SHEET_RULES, TRACK_RULES, match_field, strip_quotes
from .lines import LineSource
from .timecode import parse_index
from .track import CueTrack, track_id
from ..utils.encoding import detect_encoding

# Sheet keys copied into each new track, in this order
_INHERITED_KEYS = (meta_keys.ARTIST, meta_keys.GENRE, meta_keys.TITLE, meta_keys.YEAR)


class CueSheet:
    """
    A single-file cue sheet: sheet metadata, the media file name and an
    ordered list of contiguous tracks.

    Example:
        sheet = CueSheet.from_file("album.cue", total_length=3600000)
        for track in sheet.tracks:
            print(track.id, track.start, track.end, track.metadata.get("title"))
    """

    def __init__(self, total_length=-1):
        """
        Create an empty sheet.

        Args:
            total_length: Length of the media in milliseconds, or -1 (or 0) if unknown.
                Used as the end of the last track.
        """
        self.metadata = {}
        self.media = None
        self._tracks = []
        self._total_length = total_length

    @classmethod
    def from_stream(cls, stream, total_length=-1):
        """
        Parse a sheet from a text stream.

        Args:
            stream: Iterable of text lines (open file, StringIO, ...)
            total_length: Length of the media in milliseconds, or -1 if unknown

        Returns:
            CueSheet instance

        Raises:
            CueFormatError: If a timecode is malformed or tracks are out of order
        """
        sheet = cls(total_length)
        sheet._parse(LineSource(stream))
        return sheet

    @classmethod
    def from_file(cls, path, total_length=-1, encoding=None, log_func=None):
        """
        Parse a sheet from a .cue file.

        Args:
            path: Path to the .cue file
            total_length: Length of the media in milliseconds, or -1 if unknown
            encoding: Text encoding of the file; detected when None
            log_func: Optional function to call for logging messages

        Returns:
            CueSheet instance
        """
        if encoding is None:
            encoding = detect_encoding(path, log_func)
        with open(path, "r", encoding=encoding) as f:
            return cls.from_stream(f, total_length)

    @property
    def total_length(self):
        return self._total_length

    @property
    def tracks(self):
        """Tracks in ascending start order (a copy of the store)"""
        return list(self._tracks)

    # Parsing

    def _parse(self, source):
        for line in source:
            field = match_field(line, SHEET_RULES)
            if field:
                key, value = field
                self.metadata[key] = value
                continue

            if line.startswith("FILE ") and line.endswith(" MP3"):
                self.media = strip_quotes(line[len("FILE "):-len(" MP3")].strip())
                self._parse_file(source)

    def _parse_file(self, source):
        for line in source:
            if line.startswith("TRACK ") and line.endswith(" AUDIO"):
                while self._parse_track(source):
                    pass

    def _parse_track(self, source):
        """
        Read one track until the next `TRACK` line or the end of the stream.

        Returns:
            True if another track follows, False at end of stream
        """
        track = CueTrack(track_id(len(self._tracks) + 1))
        self._inherit_metadata(track)

        for line in source:
            if line.startswith("TRACK "):
                self._close_track(track)
                return True

            start = parse_index(line)
            if start is not None:
                self._set_start(track, start)
                continue

            field = match_field(line, TRACK_RULES)
            if field:
                key, value = field
                track.metadata[key] = value

        if track.end < 0 and self._total_length > 0:
            track.end = self._total_length
        self._close_track(track)
        return False

    def _inherit_metadata(self, track):
        for key in _INHERITED_KEYS:
            value = self.metadata.get(key)
            if not value:
                continue
            if key == meta_keys.TITLE:
                value = f"{value} ({track.id})"
            track.metadata[key] = value

    def _check_order(self, track, start):
        if self._tracks and start < self._tracks[-1].start:
            previous = self._tracks[-1]
            raise CueFormatError(
                f"Track {track.id} starts at {start} ms, before track {previous.id} ({previous.start} ms)"
            )

    def _set_start(self, track, start):
        self._check_order(track, start)
        track.start = start
        if self._tracks:
            self._tracks[-1].end = start

    def _close_track(self, track):
        self._check_order(track, track.start)
        if self._tracks and self._tracks[-1].end < 0:
            self._tracks[-1].end = track.start
        self._tracks.append(track)

    # Track store

    def get_track(self, id):
        """Return the track with the given ID, or None"""
        for track in self._tracks:
            if track.id == id:
                return track
        return None

    def _open_end(self):
        return self._total_length if self._total_length > 0 else -1

    def insert_track(self, time):
        """
        Split the sheet at a new start time.

        Args:
            time: Start of the new track in milliseconds

        Returns:
            The new track, or None if time is not positive or already a track start
        """
        if time <= 0:
            return None

        if not self._tracks:
            self._tracks.append(CueTrack(track_id(1), 0, time))
            result = CueTrack(track_id(2), time, self._open_end())
            self._tracks.append(result)
            return result

        for i, track in enumerate(self._tracks):
            if track.start == time:
                return None
            if track.start > time:
                result = CueTrack(track_id(i + 1), time, track.start)
                self._tracks.insert(i, result)
                if i > 0:
                    self._tracks[i - 1].end = time
                for position in range(i + 1, len(self._tracks)):
                    self._tracks[position].id = track_id(position + 1)
                return result

        result = CueTrack(track_id(len(self._tracks) + 1), time, self._open_end())
        self._tracks[-1].end = time
        self._tracks.append(result)
        return result

    # Serialization

    def render(self, media=None):
        """
        Return the sheet in .cue format.

        Args:
            media: Media file name for the FILE line; the line is left out when None
        """
        parts = []
        for directive, key in (("PERFORMER", meta_keys.ARTIST), ("TITLE", meta_keys.TITLE)):
            value = self.metadata.get(key)
            if value:
                parts.append(f'{directive} "{value}"\n')
        if media is not None:
            parts.append(f'FILE "{media}" MP3\n')
        parts.extend(track.render() for track in self._tracks)
        return "".join(parts)

    def save(self, path, media, encoding="utf-8"):
        """
        Write the sheet to a file in .cue format, replacing its contents.

        Args:
            path: Output file path (the parent directory must exist)
            media: Media file name written in the FILE line
            encoding: Output text encoding

        Raises:
            CueError: If media is empty or None
        """
        if not media:
            raise CueError(f"No media file name to write in the FILE line of {path}")
        with open(path, "w", encoding=encoding) as f:
            f.write(self.render(media))

    def __str__(self):
        return self.render(self.media)
