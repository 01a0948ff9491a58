"""Metadata key names shared by sheets, tracks and the update operation"""

# Keep these centralized to avoid magic strings in the parser and writer.

ARTIST = "artist"
GENRE = "genre"
TITLE = "title"
TRACK = "track"
TV_EPISODE = "tv_episode"
YEAR = "year"

SHEET_KEYS = frozenset({ARTIST, GENRE, TITLE, YEAR})
TRACK_KEYS = frozenset({ARTIST, GENRE, TITLE, TRACK, TV_EPISODE, YEAR})
