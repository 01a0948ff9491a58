"""Ordered field extraction for CUE sheet directives"""
import re
from collections import namedtuple

from . import meta_keys


FieldRule = namedtuple("FieldRule", ["key", "quoted", "bare"])


def _rule(key, directive):
    """Build a rule trying `DIRECTIVE "value"` first, then `DIRECTIVE value`"""
    return FieldRule(
        key,
        re.compile(directive + r'\s+"([^"]*)"'),
        re.compile(directive + r"\s+(\S*)"),
    )


SHEET_RULES = (
    _rule(meta_keys.ARTIST, "PERFORMER"),
    _rule(meta_keys.GENRE, "REM GENRE"),
    _rule(meta_keys.TITLE, "TITLE"),
    _rule(meta_keys.YEAR, "REM DATE"),
)

TRACK_RULES = (
    _rule(meta_keys.ARTIST, "PERFORMER"),
    _rule(meta_keys.GENRE, "REM GENRE"),
    _rule(meta_keys.TITLE, "TITLE"),
    _rule(meta_keys.TV_EPISODE, "REM " + meta_keys.TV_EPISODE),
    _rule(meta_keys.YEAR, "REM DATE"),
)


def match_field(line, rules):
    """
    Find the first rule matching a line.

    Each rule's quoted pattern is tried before its bare pattern, and the
    first success across the whole list wins.

    Args:
        line: A stripped CUE sheet line
        rules: Ordered sequence of FieldRule

    Returns:
        Tuple of (key, value), or None if no rule matches
    """
    for rule in rules:
        for pattern in (rule.quoted, rule.bare):
            match = pattern.match(line)
            if match:
                return rule.key, match.group(1)
    return None


def strip_quotes(text):
    """Remove one matching pair of double or single quotes around text"""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ('"', "'"):
        return text[1:-1]
    return text
