"""Exception classes for CUE sheet handling"""


class CueError(Exception):
    """Base exception for all CUE sheet errors."""


class CueFormatError(CueError, ValueError):
    """Raised when a numeric field is malformed or tracks are out of order."""


class TrackNotFoundError(CueError, LookupError):
    """Raised when a track ID does not exist in the sheet."""

    def __init__(self, track_id):
        super().__init__(f"Cannot find CUE sheet track: {track_id}")
        self.track_id = track_id
