"""A single track of a CUE sheet"""
from . import meta_keys
from .timecode import to_timecode


def track_id(position):
    """Format a 1-based track position as a two-digit ID ("01", "02", ...)"""
    return f"{position:02d}"


class CueTrack:
    """
    A contiguous segment of the sheet's media.

    The ID lives in the metadata under the `track` key, so renumbering
    a track only rewrites that single entry.
    """

    def __init__(self, id, start=0, end=-1):
        """
        Args:
            id: Two-digit track identifier
            start: Start offset in milliseconds from the beginning of the media
            end: End offset in milliseconds, or -1 when unknown
        """
        self.metadata = {meta_keys.TRACK: id}
        self.start = start
        self.end = end

    @property
    def id(self):
        return self.metadata.get(meta_keys.TRACK)

    @id.setter
    def id(self, value):
        self.metadata[meta_keys.TRACK] = value

    @property
    def duration(self):
        """Length in milliseconds, 0 while the end is unknown"""
        return 0 if self.end < 0 else self.end - self.start

    @staticmethod
    def supported_keys():
        return meta_keys.TRACK_KEYS

    def render(self):
        """Return this track as a CUE `TRACK` block"""
        lines = [f"  TRACK {self.id} AUDIO"]
        for directive, key in (
            ("REM GENRE", meta_keys.GENRE),
            ("REM DATE", meta_keys.YEAR),
            ("REM " + meta_keys.TV_EPISODE, meta_keys.TV_EPISODE),
            ("PERFORMER", meta_keys.ARTIST),
            ("TITLE", meta_keys.TITLE),
        ):
            value = self.metadata.get(key)
            if value:
                lines.append(f'    {directive} "{value}"')
        lines.append(f"    INDEX 01 {to_timecode(self.start)}")
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"CueTrack(id={self.id!r}, start={self.start}, end={self.end})"
