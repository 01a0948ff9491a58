"""Locating the CUE sheet that describes a media file"""
import os

from .sheet import CueSheet


def find_cue_for_media(media_path):
    """
    Locate the sibling .cue file of a media file.

    For "album.mp3" this looks for "album.cue" in the same directory,
    trying an exact match first, then a case-insensitive one.

    Args:
        media_path: Path to the media file

    Returns:
        Path to the CUE file, or None if there is none
    """
    dirpath, filename = os.path.split(media_path)
    stem, ext = os.path.splitext(filename)
    if not ext:
        return None

    candidate = stem + ".cue"
    candidate_path = os.path.join(dirpath, candidate)
    if os.path.isfile(candidate_path):
        return candidate_path

    # Try case-insensitive search (for Linux compatibility)
    try:
        filenames = os.listdir(dirpath or ".")
    except OSError:
        return None
    for existing_file in filenames:
        if existing_file.lower() == candidate.lower():
            existing_path = os.path.join(dirpath, existing_file)
            if os.path.isfile(existing_path):
                return existing_path

    return None


def load_sheet_for_media(media_path, total_length=-1, log_func=None):
    """
    Parse the CUE sheet describing a media file, if it has one.

    Args:
        media_path: Path to the media file
        total_length: Length of the media in milliseconds, or -1 if unknown
        log_func: Optional function to call for logging messages

    Returns:
        CueSheet instance, or None if no readable sheet exists
    """
    if log_func is None:
        log_func = lambda msg: None

    cue_path = find_cue_for_media(media_path)
    if cue_path is None or not os.access(cue_path, os.R_OK):
        log_func(f"ℹ️ No CUE sheet found for {os.path.basename(media_path)}")
        return None

    log_func(f"📄 Found CUE sheet: {os.path.basename(cue_path)}")
    return CueSheet.from_file(cue_path, total_length, log_func=log_func)


def describe_tracks(sheet, tracks_file=None):
    """
    Build plain dictionaries describing the tracks of a sheet.

    Args:
        sheet: Parsed CueSheet
        tracks_file: Optional path of the CUE file, copied into each entry

    Returns:
        List of dictionaries with id, start, end, duration, metadata and tracks_file
    """
    return [
        {
            "id": track.id,
            "start": track.start,
            "end": track.end,
            "duration": track.duration,
            "metadata": dict(track.metadata),
            "tracks_file": tracks_file,
        }
        for track in sheet.tracks
    ]
