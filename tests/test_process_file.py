#!/usr/bin/env python3
"""
Tests for formatting and checking files on disk.
"""

import logging
import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path to import the package
sys.path.insert(0, str(Path(__file__).parent.parent))
# pylint: disable=wrong-import-position
from whitespace_forge import cli
from whitespace_forge.changes import Change, ChangeType
from whitespace_forge.line_endings import NewLineMarkerMode
from whitespace_forge.options import Options

# Disable logging for tests
cli.logger.setLevel(logging.CRITICAL)


class TestProcessFile(unittest.TestCase):
    def setUp(self) -> None:
        # Create a temporary directory
        self.test_dir = tempfile.mkdtemp()

        self.crlf_file = os.path.join(self.test_dir, "crlf_file.txt")
        with open(self.crlf_file, "wb") as f:
            f.write(b"Line 1\r\nLine 2\r\nLine 3\r\n")

        self.mixed_file = os.path.join(self.test_dir, "mixed_file.txt")
        with open(self.mixed_file, "wb") as f:
            f.write(b"Line 1\r\nLine 2\nLine 3\rLine 4\r\n")

        self.whitespace_file = os.path.join(self.test_dir, "whitespace_file.txt")
        with open(self.whitespace_file, "wb") as f:
            f.write(b"Line 1   \nLine 2\n\n\nLine 3\n  Line 4  \n\n\n")

        self.non_utf8_file = os.path.join(self.test_dir, "non_utf8_file.txt")
        with open(self.non_utf8_file, "wb") as f:
            f.write(b"Line with special chars: \xa3\xb0\xc5\xd8\xe5\xf8  \r\n")

    def tearDown(self) -> None:
        shutil.rmtree(self.test_dir)

    def read(self, file_path: str) -> bytes:
        with open(file_path, "rb") as f:
            return f.read()

    def test_lf_conversion(self) -> None:
        """Test conversion of CRLF line endings to LF."""
        options = Options(
            normalize_new_line_markers=True, new_line_marker=NewLineMarkerMode.LINUX
        )
        changes = cli.process_file(self.crlf_file, options, check_only=False)
        self.assertEqual(len(changes), 3)
        self.assertEqual(self.read(self.crlf_file), b"Line 1\nLine 2\nLine 3\n")

    def test_mixed_line_endings_auto(self) -> None:
        """Mixed line endings are normalized to the most common one."""
        options = Options(normalize_new_line_markers=True)
        changes = cli.process_file(self.mixed_file, options, check_only=False)
        self.assertEqual([change.line_number for change in changes], [2, 3])
        self.assertEqual(
            self.read(self.mixed_file), b"Line 1\r\nLine 2\r\nLine 3\r\nLine 4\r\n"
        )

    def test_whitespace_removal(self) -> None:
        options = Options(remove_trailing_whitespace=True, remove_trailing_empty_lines=True)
        changes = cli.process_file(self.whitespace_file, options, check_only=False)
        self.assertEqual(
            changes,
            [
                Change(1, ChangeType.REMOVED_TRAILING_WHITESPACE),
                Change(6, ChangeType.REMOVED_TRAILING_WHITESPACE),
                Change(7, ChangeType.REMOVED_TRAILING_EMPTY_LINES),
            ],
        )
        self.assertEqual(
            self.read(self.whitespace_file), b"Line 1\nLine 2\n\n\nLine 3\n  Line 4\n"
        )

    def test_check_only_does_not_modify(self) -> None:
        options = Options(remove_trailing_whitespace=True)
        before = self.read(self.whitespace_file)
        changes = cli.process_file(self.whitespace_file, options, check_only=True)
        self.assertEqual(len(changes), 2)
        self.assertEqual(self.read(self.whitespace_file), before)

    def test_unchanged_file_is_not_rewritten(self) -> None:
        lf_file = os.path.join(self.test_dir, "lf_file.txt")
        with open(lf_file, "wb") as f:
            f.write(b"Line 1\nLine 2\n")
        os.utime(lf_file, (1_000_000, 1_000_000))

        changes = cli.process_file(
            lf_file, Options(remove_trailing_whitespace=True), check_only=False
        )
        self.assertEqual(changes, [])
        self.assertEqual(os.stat(lf_file).st_mtime, 1_000_000)

    def test_non_utf8_files(self) -> None:
        """Bytes outside ASCII are copied verbatim."""
        options = Options(
            remove_trailing_whitespace=True,
            normalize_new_line_markers=True,
            new_line_marker=NewLineMarkerMode.LINUX,
        )
        cli.process_file(self.non_utf8_file, options, check_only=False)
        self.assertEqual(
            self.read(self.non_utf8_file),
            b"Line with special chars: \xa3\xb0\xc5\xd8\xe5\xf8\n",
        )

    def test_second_run_changes_nothing(self) -> None:
        options = Options(
            add_new_line_marker_at_end_of_file=True,
            normalize_new_line_markers=True,
            remove_trailing_whitespace=True,
            remove_trailing_empty_lines=True,
            replace_tabs_with_spaces=4,
        )
        for file_path in (self.crlf_file, self.mixed_file, self.whitespace_file):
            cli.process_file(file_path, options, check_only=False)
            self.assertEqual(cli.process_file(file_path, options, check_only=True), [])


class TestProcessFiles(unittest.TestCase):
    def setUp(self) -> None:
        self.test_dir = tempfile.mkdtemp()
        self.files = []
        for i in range(5):
            file_path = os.path.join(self.test_dir, f"test_{i}.txt")
            with open(file_path, "wb") as f:
                f.write(b"Line 1\r\nLine 2\r\n" if i % 2 == 0 else b"Line 1\nLine 2\n")
            self.files.append(file_path)

    def tearDown(self) -> None:
        shutil.rmtree(self.test_dir)

    def test_process_files_counts_changed_files(self) -> None:
        options = Options(
            normalize_new_line_markers=True, new_line_marker=NewLineMarkerMode.LINUX
        )
        self.assertEqual(cli.process_files(self.files, options, check_only=True), 3)
        self.assertEqual(cli.process_files(self.files, options, check_only=False), 3)
        self.assertEqual(cli.process_files(self.files, options, check_only=True), 0)
        for file_path in self.files:
            with open(file_path, "rb") as f:
                self.assertEqual(f.read(), b"Line 1\nLine 2\n")

    def test_report_lists_every_change(self) -> None:
        options = Options(
            normalize_new_line_markers=True, new_line_marker=NewLineMarkerMode.LINUX
        )
        with self.assertLogs(cli.logger, level="INFO") as logs:
            cli.process_files(self.files[:1], options, check_only=True)
        output = "\n".join(logs.output)
        self.assertIn("File would be reformatted", output)
        self.assertIn("line 1: New line marker '\\r\\n' would be replaced by '\\n'.", output)
        self.assertIn("line 2: New line marker '\\r\\n' would be replaced by '\\n'.", output)


if __name__ == "__main__":
    unittest.main()
