"""Utility functions and helpers"""

from .helpers import safe_print, format_millis
from .encoding import detect_encoding

__all__ = ["safe_print", "format_millis", "detect_encoding"]
