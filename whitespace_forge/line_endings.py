"""
Line ending (new line marker) model.

All processing works on raw bytes, so the characters we care about are
kept as integer byte values rather than one-character strings.
"""

import enum

CARRIAGE_RETURN: int = 0x0D
LINE_FEED: int = 0x0A
SPACE: int = 0x20
TAB: int = 0x09
VERTICAL_TAB: int = 0x0B  # '\v'
FORM_FEED: int = 0x0C  # '\f'

WHITESPACE: frozenset = frozenset(
    {CARRIAGE_RETURN, LINE_FEED, SPACE, TAB, VERTICAL_TAB, FORM_FEED}
)

_VISIBLE_CHARACTERS = {
    CARRIAGE_RETURN: "\\r",
    LINE_FEED: "\\n",
    SPACE: " ",
    TAB: "\\t",
    VERTICAL_TAB: "\\v",
    FORM_FEED: "\\f",
}


def char_to_str(char: int) -> str:
    """Convert a whitespace byte to a human-readable escape sequence."""
    return _VISIBLE_CHARACTERS.get(char, "?")


class LineEnding(enum.Enum):
    """
    The three recognized new line markers:
    1) Linux '\\n'
    2) MacOS '\\r'
    3) Windows/DOS '\\r\\n'
    """

    LINUX = b"\n"
    MACOS = b"\r"
    WINDOWS = b"\r\n"

    def to_bytes(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return "".join(char_to_str(char) for char in self.value)


class NewLineMarkerMode(enum.Enum):
    """New line marker to use in the output files."""

    AUTO = "auto"
    LINUX = "linux"
    MACOS = "mac-os"
    WINDOWS = "windows"


_FIXED_MODES = {
    NewLineMarkerMode.LINUX: LineEnding.LINUX,
    NewLineMarkerMode.MACOS: LineEnding.MACOS,
    NewLineMarkerMode.WINDOWS: LineEnding.WINDOWS,
}


def find_most_common_line_ending(data: bytes) -> LineEnding:
    """
    Compute the most common new line marker in the data.

    A carriage return immediately followed by a line feed counts as a single
    Windows marker. Ties are broken Linux > Windows > MacOS, so data without
    any marker resolves to Linux.
    """
    linux_count: int = 0
    macos_count: int = 0
    windows_count: int = 0
    length: int = len(data)
    i: int = 0

    while i < length:
        if data[i] == CARRIAGE_RETURN:
            if i + 1 < length and data[i + 1] == LINE_FEED:
                windows_count += 1
                i += 1
            else:
                macos_count += 1
        elif data[i] == LINE_FEED:
            linux_count += 1
        i += 1

    if macos_count > windows_count and macos_count > linux_count:
        return LineEnding.MACOS
    if windows_count > linux_count:
        return LineEnding.WINDOWS
    return LineEnding.LINUX


def resolve_line_ending(mode: NewLineMarkerMode, data: bytes) -> LineEnding:
    """Pick the concrete line ending to write for the given mode."""
    if mode is NewLineMarkerMode.AUTO:
        return find_most_common_line_ending(data)
    return _FIXED_MODES[mode]
