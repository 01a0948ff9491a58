"""CUE sheet timecode conversion.

CUE time format: MM:SS:FF (minutes, seconds, frames), 75 frames per second.
"""
import re

from .exceptions import CueFormatError

FRAMES_PER_SECOND = 75

INDEX_PATTERN = re.compile(r"INDEX\s+01\s+([0-9][0-9]):([0-9][0-9]):([0-9][0-9])")


def _to_int(value, name):
    try:
        return int(value, 10) if isinstance(value, str) else int(value)
    except ValueError:
        raise CueFormatError(f"Invalid {name} value in timecode: {value!r}") from None


def to_millis(minutes, seconds, frames):
    """
    Convert a MM:SS:FF timecode to milliseconds.

    Args:
        minutes: Minutes (int or digit string)
        seconds: Seconds (int or digit string), not bounded to < 60
        frames: Frames of 1/75 second (int or digit string)

    Returns:
        Offset in milliseconds
    """
    mm = _to_int(minutes, "minutes")
    ss = _to_int(seconds, "seconds")
    ff = _to_int(frames, "frames")
    return mm * 60000 + ss * 1000 + round(ff * 1000 / FRAMES_PER_SECOND)


def parse_index(line):
    """Return the start offset in ms of an `INDEX 01` line, or None for other lines"""
    match = INDEX_PATTERN.match(line)
    if not match:
        return None
    return to_millis(*match.groups())


def to_timecode(millis):
    """
    Format milliseconds as MM:SS:00.

    The frame field is always written as 00, so sub-second precision
    is lost when a sheet is saved.
    """
    total_seconds = millis // 1000
    return f"{total_seconds // 60:02d}:{total_seconds % 60:02d}:00"
