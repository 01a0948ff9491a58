import io
import os
import tempfile
import unittest

from cue_editor.core.exceptions import TrackNotFoundError
from cue_editor.core.sheet import CueSheet
from cue_editor.core.update import update
from tests.sample_sheets import TWO_TRACK_CUE


class RejectAll:
    def accept(self, path):
        return False


class TestUpdate(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmpdir.name, "live.cue")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(TWO_TRACK_CUE)

    def tearDown(self) -> None:
        self._tmpdir.cleanup()

    def _read(self):
        with open(self.path, encoding="utf-8") as f:
            return f.read()

    def _sheet(self):
        with open(self.path, encoding="utf-8") as f:
            return CueSheet.from_stream(f)

    def test_changes_only_target_track(self) -> None:
        values = {"track": "02", "title": "New"}
        self.assertTrue(update(self.path, values))

        sheet = self._sheet()
        self.assertEqual(sheet.get_track("02").metadata["title"], "New")
        self.assertEqual(sheet.get_track("01").metadata["title"], "Opening")
        self.assertEqual(sheet.media, "live.mp3")
        self.assertEqual([t.start for t in sheet.tracks], [0, 270000])
        self.assertEqual(values, {"track": "02"})

    def test_second_identical_update_changes_nothing(self) -> None:
        self.assertTrue(update(self.path, {"track": "02", "title": "New"}))
        content = self._read()

        values = {"track": "02", "title": "New"}
        self.assertFalse(update(self.path, values))
        self.assertEqual(self._read(), content)
        self.assertEqual(values, {"track": "02", "title": "New"})

    def test_unsupported_keys_are_left_in_values(self) -> None:
        values = {"track": "01", "artist": "Guest", "comment": "ignored"}
        self.assertTrue(update(self.path, values))
        self.assertEqual(values, {"track": "01", "comment": "ignored"})
        self.assertEqual(self._sheet().get_track("01").metadata["artist"], "Guest")

    def test_episode_and_year_are_written(self) -> None:
        self.assertTrue(update(self.path, {"track": "01", "tv_episode": "S01E01", "year": 1999}))
        content = self._read()
        self.assertIn('    REM tv_episode "S01E01"\n', content)
        self.assertIn('    REM DATE "1999"\n', content)
        self.assertEqual(self._sheet().get_track("01").metadata["tv_episode"], "S01E01")

    def test_none_value_removes_field(self) -> None:
        values = {"track": "02", "title": None}
        self.assertTrue(update(self.path, values))
        self.assertNotIn('TITLE "Encore"', self._read())
        self.assertEqual(values, {"track": "02"})

    def test_unknown_track_raises_and_leaves_file(self) -> None:
        with self.assertRaises(TrackNotFoundError) as ctx:
            update(self.path, {"track": "07", "title": "x"})
        self.assertEqual(ctx.exception.track_id, "07")
        self.assertEqual(self._read(), TWO_TRACK_CUE)

    def test_precondition_failures_return_false(self) -> None:
        self.assertFalse(update(self.path, {}))
        self.assertFalse(update(self.path, None))
        self.assertFalse(update(self.path, {"title": "x"}))
        self.assertFalse(update(os.path.join(self._tmpdir.name, "missing.cue"), {"track": "01", "title": "x"}))
        self.assertFalse(update(self.path, {"track": "01", "title": "x"}, file_type=RejectAll()))
        self.assertEqual(self._read(), TWO_TRACK_CUE)

    def test_non_cue_file_is_refused(self) -> None:
        other = os.path.join(self._tmpdir.name, "live.txt")
        with open(other, "w", encoding="utf-8") as f:
            f.write(TWO_TRACK_CUE)
        self.assertFalse(update(other, {"track": "01", "title": "x"}))

    def test_logs_progress(self) -> None:
        messages = []
        update(self.path, {"track": "02", "title": "New"}, log_func=messages.append)
        self.assertTrue(any("setting title" in m for m in messages))
        self.assertTrue(any("Saved 1 change" in m for m in messages))

    def test_track_id_value_is_not_an_applied_change(self) -> None:
        values = {"track": "02"}
        self.assertFalse(update(self.path, values))
        self.assertEqual(values, {"track": "02"})

    def test_updated_sheet_is_parseable_from_stream(self) -> None:
        update(self.path, {"track": "01", "title": "First"})
        sheet = CueSheet.from_stream(io.StringIO(self._read()))
        self.assertEqual([t.metadata["title"] for t in sheet.tracks], ["First", "Encore"])


if __name__ == "__main__":
    unittest.main()
