"""File-type acceptance for CUE sheet files"""
import os

from . import meta_keys


class CueFileType:
    """Accepts regular files carrying a CUE sheet extension."""

    def __init__(self, extensions=(".cue",)):
        self.extensions = tuple(ext.lower() for ext in extensions)

    def accept(self, path):
        """Return True if path is an existing file with a CUE extension"""
        return os.path.isfile(path) and os.path.basename(path).lower().endswith(self.extensions)

    def supports_key(self, key):
        """Return True if key is a metadata key a CUE track can store"""
        return key in meta_keys.TRACK_KEYS

    def accepts_metadata(self, path, key):
        """
        Check whether a metadata key can be edited in a file.

        Args:
            path: File to edit
            key: Metadata key name

        Returns:
            True if path is a CUE file and its tracks can store key
        """
        return self.accept(path) and self.supports_key(key)
