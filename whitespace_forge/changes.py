"""
Changes made (or that would be made) to a file, and their human-readable form.
"""

import enum
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .line_endings import LineEnding, char_to_str


class ChangeType(enum.Enum):
    NEW_LINE_MARKER_ADDED_TO_END_OF_FILE = enum.auto()
    NEW_LINE_MARKER_REMOVED_FROM_END_OF_FILE = enum.auto()
    REPLACED_NEW_LINE_MARKER = enum.auto()
    REMOVED_TRAILING_WHITESPACE = enum.auto()
    REMOVED_LEADING_EMPTY_LINES = enum.auto()
    REMOVED_TRAILING_EMPTY_LINES = enum.auto()
    REPLACED_EMPTY_FILE_WITH_ONE_LINE = enum.auto()
    REPLACED_WHITESPACE_ONLY_FILE_WITH_EMPTY_FILE = enum.auto()
    REPLACED_WHITESPACE_ONLY_FILE_WITH_ONE_LINE = enum.auto()
    REPLACED_TAB_WITH_SPACES = enum.auto()
    REMOVED_TAB = enum.auto()
    REPLACED_NONSTANDARD_WHITESPACE_BY_SPACE = enum.auto()
    REMOVED_NONSTANDARD_WHITESPACE = enum.auto()


# (applied, check-only) description templates for each change type.
_DESCRIPTIONS: Dict[ChangeType, Tuple[str, str]] = {
    ChangeType.NEW_LINE_MARKER_ADDED_TO_END_OF_FILE: (
        "New line marker was added to the end of the file.",
        "New line marker would be added to the end of the file.",
    ),
    ChangeType.NEW_LINE_MARKER_REMOVED_FROM_END_OF_FILE: (
        "New line marker was removed from the end of the file.",
        "New line marker would be removed from the end of the file.",
    ),
    ChangeType.REPLACED_NEW_LINE_MARKER: (
        "New line marker '{old}' was replaced by '{new}'.",
        "New line marker '{old}' would be replaced by '{new}'.",
    ),
    ChangeType.REMOVED_TRAILING_WHITESPACE: (
        "Trailing whitespace was removed.",
        "Trailing whitespace would be removed.",
    ),
    ChangeType.REMOVED_LEADING_EMPTY_LINES: (
        "Empty line(s) at the beginning of the file were removed.",
        "Empty line(s) at the beginning of the file would be removed.",
    ),
    ChangeType.REMOVED_TRAILING_EMPTY_LINES: (
        "Empty line(s) at the end of the file were removed.",
        "Empty line(s) at the end of the file would be removed.",
    ),
    ChangeType.REPLACED_EMPTY_FILE_WITH_ONE_LINE: (
        "Empty file was replaced with a single empty line.",
        "Empty file would be replaced with a single empty line.",
    ),
    ChangeType.REPLACED_WHITESPACE_ONLY_FILE_WITH_EMPTY_FILE: (
        "File was replaced with an empty file.",
        "File would be replaced with an empty file.",
    ),
    ChangeType.REPLACED_WHITESPACE_ONLY_FILE_WITH_ONE_LINE: (
        "File was replaced with a single empty line.",
        "File would be replaced with a single empty line.",
    ),
    ChangeType.REPLACED_TAB_WITH_SPACES: (
        "Tab was replaced with {spaces} space(s).",
        "Tab would be replaced with {spaces} space(s).",
    ),
    ChangeType.REMOVED_TAB: (
        "Tab was removed.",
        "Tab would be removed.",
    ),
    ChangeType.REPLACED_NONSTANDARD_WHITESPACE_BY_SPACE: (
        "Non-standard whitespace character '{character}' was replaced by a space.",
        "Non-standard whitespace character '{character}' would be replaced by a space.",
    ),
    ChangeType.REMOVED_NONSTANDARD_WHITESPACE: (
        "Non-standard whitespace character '{character}' was removed.",
        "Non-standard whitespace character '{character}' would be removed.",
    ),
}


# Payload fields each change type must carry. All other payload fields stay None.
_PAYLOAD_FIELDS: Dict[ChangeType, Tuple[str, ...]] = {
    ChangeType.REPLACED_NEW_LINE_MARKER: ("old_line_ending", "new_line_ending"),
    ChangeType.REPLACED_TAB_WITH_SPACES: ("spaces",),
    ChangeType.REPLACED_NONSTANDARD_WHITESPACE_BY_SPACE: ("character",),
    ChangeType.REMOVED_NONSTANDARD_WHITESPACE: ("character",),
}


@dataclass(frozen=True)
class Change:
    """
    A single change at a line of the output file (1-based).

    Only some change types carry a payload:
    - REPLACED_NEW_LINE_MARKER: old_line_ending and new_line_ending
    - REPLACED_TAB_WITH_SPACES: spaces
    - REPLACED_NONSTANDARD_WHITESPACE_BY_SPACE and
      REMOVED_NONSTANDARD_WHITESPACE: character (the byte value)
    """

    line_number: int
    change_type: ChangeType
    old_line_ending: Optional[LineEnding] = None
    new_line_ending: Optional[LineEnding] = None
    spaces: Optional[int] = None
    character: Optional[int] = None

    def __post_init__(self) -> None:
        expected: Tuple[str, ...] = _PAYLOAD_FIELDS.get(self.change_type, ())
        for field_name in ("old_line_ending", "new_line_ending", "spaces", "character"):
            is_set: bool = getattr(self, field_name) is not None
            if is_set != (field_name in expected):
                raise ValueError(
                    f"{self.change_type.name} change "
                    f"{'requires' if field_name in expected else 'does not take'} "
                    f"{field_name}"
                )

    def describe(self, check_only: bool) -> str:
        """Human-readable description of the change without the line number."""
        applied, prospective = _DESCRIPTIONS[self.change_type]
        template: str = prospective if check_only else applied
        character: str = "?"
        if self.character is not None:
            character = char_to_str(self.character)
        return template.format(
            old=str(self.old_line_ending),
            new=str(self.new_line_ending),
            spaces=self.spaces,
            character=character,
        )

    def to_string(self, check_only: bool) -> str:
        return f"line {self.line_number}: {self.describe(check_only)}"
