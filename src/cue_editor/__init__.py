"""
CUE Editor - Read, split and edit single-file CUE sheets

This package provides functionality to:
- Parse CUE sheets into tracks with millisecond start/end offsets
- Insert new split points and renumber the following tracks
- Change track metadata in place in an existing .cue file
- Serve those operations over a small HTTP API
"""

__version__ = "1.0.0"
__author__ = "CUE Editor Project"
