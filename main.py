#!/usr/bin/env python3
"""
CUE Editor - Main Entry Point

Reads, splits and edits single-file CUE sheets.
Features:
- Track listing with millisecond start/end offsets
- Inserting split points with automatic renumbering
- In-place metadata updates of one track
- A small HTTP service exposing the same operations
"""
import os
import sys

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from cue_editor.cli import main


if __name__ == "__main__":
    sys.exit(main())
