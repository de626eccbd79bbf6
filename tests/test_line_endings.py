#!/usr/bin/env python3
"""
Tests for the line ending model and the most common line ending detection.
"""

import sys
import unittest
from pathlib import Path

# Add parent directory to path to import the package
sys.path.insert(0, str(Path(__file__).parent.parent))
from whitespace_forge.line_endings import (  # pylint: disable=wrong-import-position
    LineEnding,
    NewLineMarkerMode,
    char_to_str,
    find_most_common_line_ending,
    resolve_line_ending,
)


class TestLineEnding(unittest.TestCase):
    def test_bytes(self) -> None:
        """Each line ending maps to its fixed byte sequence."""
        self.assertEqual(LineEnding.LINUX.to_bytes(), b"\n")
        self.assertEqual(LineEnding.MACOS.to_bytes(), b"\r")
        self.assertEqual(LineEnding.WINDOWS.to_bytes(), b"\r\n")

    def test_str_is_visible(self) -> None:
        """Line endings render as escape sequences, never as raw control bytes."""
        self.assertEqual(str(LineEnding.LINUX), "\\n")
        self.assertEqual(str(LineEnding.MACOS), "\\r")
        self.assertEqual(str(LineEnding.WINDOWS), "\\r\\n")

    def test_char_to_str(self) -> None:
        self.assertEqual(char_to_str(0x0B), "\\v")
        self.assertEqual(char_to_str(0x0C), "\\f")
        self.assertEqual(char_to_str(ord("\t")), "\\t")
        self.assertEqual(char_to_str(ord(" ")), " ")
        self.assertEqual(char_to_str(ord("x")), "?")


class TestFindMostCommonLineEnding(unittest.TestCase):
    def test_no_markers_resolves_to_linux(self) -> None:
        self.assertIs(find_most_common_line_ending(b""), LineEnding.LINUX)
        self.assertIs(find_most_common_line_ending(b"hello world"), LineEnding.LINUX)

    def test_single_kind(self) -> None:
        self.assertIs(find_most_common_line_ending(b"\n"), LineEnding.LINUX)
        self.assertIs(find_most_common_line_ending(b"\r"), LineEnding.MACOS)
        self.assertIs(find_most_common_line_ending(b"\r\n"), LineEnding.WINDOWS)

    def test_majority_wins(self) -> None:
        self.assertIs(find_most_common_line_ending(b"a\rb\nc\n"), LineEnding.LINUX)
        self.assertIs(find_most_common_line_ending(b"a\rb\rc\r\n"), LineEnding.MACOS)
        self.assertIs(
            find_most_common_line_ending(b"a\r\nb\r\nc\n"), LineEnding.WINDOWS
        )
        self.assertIs(find_most_common_line_ending(b"\n\r\r\r\n"), LineEnding.MACOS)

    def test_carriage_return_followed_by_line_feed_counts_once(self) -> None:
        """'\\r\\n' is one Windows marker, not a MacOS plus a Linux marker."""
        self.assertIs(
            find_most_common_line_ending(b"\r\n\r\n\n"), LineEnding.WINDOWS
        )

    def test_ties_prefer_linux_then_windows_then_macos(self) -> None:
        # All three tied.
        self.assertIs(find_most_common_line_ending(b"\n\r\r\n"), LineEnding.LINUX)
        # Linux ties with MacOS and Windows.
        self.assertIs(
            find_most_common_line_ending(b"\n\n\r\r\r\n\r\n"), LineEnding.LINUX
        )
        # Windows ties with MacOS.
        self.assertIs(
            find_most_common_line_ending(b"\n\r\r\r\n\r\n"), LineEnding.WINDOWS
        )
        # Linux ties with Windows.
        self.assertIs(find_most_common_line_ending(b"a\nb\r\n"), LineEnding.LINUX)


class TestResolveLineEnding(unittest.TestCase):
    def test_fixed_modes_ignore_content(self) -> None:
        data = b"a\r\nb\r\n"
        self.assertIs(
            resolve_line_ending(NewLineMarkerMode.LINUX, data), LineEnding.LINUX
        )
        self.assertIs(
            resolve_line_ending(NewLineMarkerMode.MACOS, data), LineEnding.MACOS
        )
        self.assertIs(
            resolve_line_ending(NewLineMarkerMode.WINDOWS, b"a\n"), LineEnding.WINDOWS
        )

    def test_auto_mode_uses_content(self) -> None:
        self.assertIs(
            resolve_line_ending(NewLineMarkerMode.AUTO, b"a\r\nb\r\n"),
            LineEnding.WINDOWS,
        )
        self.assertIs(resolve_line_ending(NewLineMarkerMode.AUTO, b""), LineEnding.LINUX)


if __name__ == "__main__":
    unittest.main()
