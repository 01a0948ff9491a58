"""Change track metadata inside an existing CUE file"""
import os

from . import meta_keys
from .exceptions import TrackNotFoundError
from .file_type import CueFileType
from .sheet import CueSheet


def update(cue_path, values, file_type=None, encoding=None, log_func=None):
    """
    Change the metadata of one track of an existing .cue file.

    The target track is selected by the `track` entry of values. Keys
    that were written are removed from values, so whatever remains was
    either unchanged or not supported by a CUE track.

    Args:
        cue_path: Path to the .cue file
        values: Dictionary of metadata key to new value, including `track`
        file_type: Object with accept(path), defaults to CueFileType()
        encoding: Text encoding of the file; detected when None
        log_func: Optional function to call for logging messages

    Returns:
        True if the file was rewritten, False otherwise

    Raises:
        TrackNotFoundError: If no track has the requested ID
        OSError: If reading or writing the file fails
    """
    if log_func is None:
        log_func = lambda msg: None
    if file_type is None:
        file_type = CueFileType()

    if not os.path.exists(cue_path) or not os.access(cue_path, os.R_OK):
        return False
    if not file_type.accept(cue_path):
        return False
    if not values or values.get(meta_keys.TRACK) is None:
        return False

    log_func(f"📝 Updating CUE sheet {cue_path}...")

    try:
        sheet = CueSheet.from_file(cue_path, 0, encoding=encoding, log_func=log_func)

        track_id = str(values[meta_keys.TRACK])
        track = sheet.get_track(track_id)
        if track is None:
            raise TrackNotFoundError(track_id)

        applied = []
        for key, value in values.items():
            if key not in track.supported_keys():
                continue
            new_value = None if value is None else str(value)
            if track.metadata.get(key) == new_value:
                continue

            log_func(f"✏️ Track {track_id}: setting {key} = {new_value!r}")
            if new_value is None:
                track.metadata.pop(key, None)
            else:
                track.metadata[key] = new_value
            applied.append(key)

        if not applied:
            log_func(f"ℹ️ Nothing to change in track {track_id}")
            return False

        sheet.save(cue_path, sheet.media)
    except OSError as e:
        log_func(f"❌ Failed to update CUE sheet {cue_path}: {e}")
        raise

    for key in applied:
        del values[key]

    log_func(f"✅ Saved {len(applied)} change(s) to {os.path.basename(cue_path)}")
    return True
