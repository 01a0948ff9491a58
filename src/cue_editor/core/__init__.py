"""Core functionality modules"""

from .exceptions import CueError, CueFormatError, TrackNotFoundError
from .track import CueTrack
from .sheet import CueSheet
from .update import update
from .file_type import CueFileType
from .file_finder import find_cue_for_media, load_sheet_for_media, describe_tracks

__all__ = [
    "CueError",
    "CueFormatError",
    "TrackNotFoundError",
    "CueTrack",
    "CueSheet",
    "update",
    "CueFileType",
    "find_cue_for_media",
    "load_sheet_for_media",
    "describe_tracks",
]
