import unittest

from cue_editor.core import meta_keys
from cue_editor.core.fields import SHEET_RULES, TRACK_RULES, match_field, strip_quotes


class TestMatchField(unittest.TestCase):
    def test_quoted_and_bare_title_give_same_value(self) -> None:
        self.assertEqual(match_field('TITLE "Hello"', SHEET_RULES), (meta_keys.TITLE, "Hello"))
        self.assertEqual(match_field("TITLE Hello", SHEET_RULES), (meta_keys.TITLE, "Hello"))

    def test_quoted_value_keeps_inner_spaces(self) -> None:
        self.assertEqual(
            match_field('PERFORMER "Daft Punk"', SHEET_RULES),
            (meta_keys.ARTIST, "Daft Punk"),
        )

    def test_bare_value_stops_at_whitespace(self) -> None:
        self.assertEqual(match_field("TITLE Hello World", SHEET_RULES), (meta_keys.TITLE, "Hello"))

    def test_arbitrary_whitespace_after_directive(self) -> None:
        self.assertEqual(match_field('REM DATE \t "1999"', SHEET_RULES), (meta_keys.YEAR, "1999"))

    def test_first_rule_wins_across_list(self) -> None:
        # The performer rule's bare pattern matches before the title rule is tried
        self.assertEqual(match_field('PERFORMER TITLE "x"', SHEET_RULES), (meta_keys.ARTIST, "TITLE"))

    def test_episode_only_matched_at_track_level(self) -> None:
        line = 'REM tv_episode "S02E05"'
        self.assertIsNone(match_field(line, SHEET_RULES))
        self.assertEqual(match_field(line, TRACK_RULES), (meta_keys.TV_EPISODE, "S02E05"))

    def test_unknown_directives_do_not_match(self) -> None:
        self.assertIsNone(match_field('REM COMMENT "ripped"', TRACK_RULES))
        self.assertIsNone(match_field("INDEX 01 00:00:00", TRACK_RULES))
        self.assertIsNone(match_field('FILE "a.mp3" MP3', SHEET_RULES))

    def test_rule_tables_are_immutable(self) -> None:
        self.assertIsInstance(SHEET_RULES, tuple)
        self.assertIsInstance(TRACK_RULES, tuple)
        self.assertEqual([r.key for r in SHEET_RULES], ["artist", "genre", "title", "year"])


class TestStripQuotes(unittest.TestCase):
    def test_strips_one_matching_pair(self) -> None:
        self.assertEqual(strip_quotes('"a.mp3"'), "a.mp3")
        self.assertEqual(strip_quotes("'a.mp3'"), "a.mp3")
        self.assertEqual(strip_quotes('""a.mp3""'), '"a.mp3"')

    def test_leaves_unmatched_quotes(self) -> None:
        self.assertEqual(strip_quotes('"a.mp3\''), '"a.mp3\'')
        self.assertEqual(strip_quotes("a.mp3"), "a.mp3")
        self.assertEqual(strip_quotes('"'), '"')
        self.assertEqual(strip_quotes(""), "")


if __name__ == "__main__":
    unittest.main()
