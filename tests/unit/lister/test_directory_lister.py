"""Controller tests: notices, sink resets, and row delivery."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirlister.lister import CANCELLED_MESSAGE, INVALID_PATH_MESSAGE, DirectoryLister
from dirlister.listing import EMPTY_FOLDER_TEXT, list_directory
from dirlister.selection import fixed_path_source
from dirlister.sink import CollectingSink


class ShowDirectoryContentsTests(unittest.TestCase):
    def test_rows_match_walker_entries(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            (root / "docs" / "guide.md").write_text("# guide\n", encoding="utf-8")
            (root / "readme.txt").write_bytes(b"x" * 4096)
            sink = CollectingSink()
            notify = mock.Mock()

            listed = DirectoryLister(sink, notify).show_directory_contents(root)
            expected = [entry.as_row() for entry in list_directory(root)]

        self.assertTrue(listed)
        notify.assert_not_called()
        self.assertEqual(sink.rows, expected)
        self.assertIn((str(root / "readme.txt"), "4 KB", "File"), [row[:3] for row in sink.rows])

    def test_missing_path_notifies_and_resets(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sink = CollectingSink()
            sink.append_row("stale", "", "", "")
            notify = mock.Mock()

            listed = DirectoryLister(sink, notify).show_directory_contents(Path(tmp) / "missing")

        self.assertFalse(listed)
        notify.assert_called_once_with(INVALID_PATH_MESSAGE)
        self.assertEqual(sink.rows, [])
        self.assertEqual(sink.reset_count, 1)

    def test_none_path_reports_cancellation(self) -> None:
        sink = CollectingSink()
        notify = mock.Mock()

        listed = DirectoryLister(sink, notify).show_directory_contents(None)

        self.assertFalse(listed)
        notify.assert_called_once_with(CANCELLED_MESSAGE)
        self.assertEqual(sink.reset_count, 1)

    def test_empty_directory_shows_marker_row(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sink = CollectingSink()
            DirectoryLister(sink, mock.Mock()).show_directory_contents(Path(tmp))

        self.assertEqual(len(sink.rows), 1)
        self.assertEqual(sink.rows[0][:3], (EMPTY_FOLDER_TEXT, "", ""))

    def test_permission_errors_propagate(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / "locked").mkdir()
            sink = CollectingSink()
            notify = mock.Mock()
            with mock.patch("dirlister.listing.walker._scan", side_effect=PermissionError("denied")):
                with self.assertRaises(PermissionError):
                    DirectoryLister(sink, notify).show_directory_contents(Path(tmp))

        notify.assert_not_called()


class SelectDirectoryTests(unittest.TestCase):
    def test_select_directory_sets_address_and_base_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a", encoding="utf-8")
            sink = CollectingSink()
            lister = DirectoryLister(sink, mock.Mock())

            listed = lister.select_directory(fixed_path_source(root))

        self.assertTrue(listed)
        self.assertEqual(lister.base_path, root)
        self.assertEqual(sink.address, str(root))
        self.assertEqual(len(sink.rows), 1)
        self.assertEqual(sink.reset_count, 1)

    def test_cancelled_selection_clears_address(self) -> None:
        sink = CollectingSink()
        notify = mock.Mock()
        lister = DirectoryLister(sink, notify)

        listed = lister.select_directory(lambda: None)

        self.assertFalse(listed)
        self.assertIsNone(lister.base_path)
        self.assertEqual(sink.address, "")
        notify.assert_called_once_with(CANCELLED_MESSAGE)
        self.assertEqual(sink.reset_count, 2)

    def test_follow_symlinks_option_reaches_walker(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            sink = CollectingSink()
            lister = DirectoryLister(sink, mock.Mock(), follow_symlinks=False)
            with mock.patch("dirlister.lister.iter_entries", return_value=iter(())) as iter_entries:
                lister.show_directory_contents(Path(tmp))

        iter_entries.assert_called_once_with(Path(tmp), follow_symlinks=False)


if __name__ == "__main__":
    unittest.main()
