"""
Formatting options shared by all files of a run.
"""

import enum
from dataclasses import dataclass

from .errors import InvalidConfigurationError
from .line_endings import NewLineMarkerMode


class TrivialFileMode(enum.Enum):
    """What to do with an empty or whitespace-only file."""

    IGNORE = "ignore"
    EMPTY = "empty"
    ONE_LINE = "one-line"


class NonStandardWhitespaceMode(enum.Enum):
    """What to do with vertical tab and form feed characters."""

    IGNORE = "ignore"
    REPLACE_WITH_SPACE = "replace-with-space"
    REMOVE = "remove"


@dataclass(frozen=True)
class Options:  # pylint: disable=too-many-instance-attributes
    """Options for formatting a single file. The defaults change nothing."""

    add_new_line_marker_at_end_of_file: bool = False
    remove_new_line_marker_from_end_of_file: bool = False
    normalize_new_line_markers: bool = False
    new_line_marker: NewLineMarkerMode = NewLineMarkerMode.AUTO
    remove_trailing_whitespace: bool = False
    remove_leading_empty_lines: bool = False
    remove_trailing_empty_lines: bool = False
    normalize_empty_files: TrivialFileMode = TrivialFileMode.IGNORE
    normalize_whitespace_only_files: TrivialFileMode = TrivialFileMode.IGNORE
    replace_tabs_with_spaces: int = -1
    normalize_non_standard_whitespace: NonStandardWhitespaceMode = (
        NonStandardWhitespaceMode.IGNORE
    )

    def validate(self) -> None:
        """
        Reject combinations of options that cannot be applied idempotently.

        Replacing empty files with one line while replacing whitespace-only
        files with empty files would flip a file between the two states on
        every run.
        """
        if (
            self.add_new_line_marker_at_end_of_file
            and self.remove_new_line_marker_from_end_of_file
        ):
            raise InvalidConfigurationError(
                "--add-new-line-marker-at-end-of-file cannot be used with "
                "--remove-new-line-marker-from-end-of-file"
            )
        if (
            self.normalize_empty_files is TrivialFileMode.ONE_LINE
            and self.normalize_whitespace_only_files is TrivialFileMode.EMPTY
        ):
            raise InvalidConfigurationError(
                "--normalize-whitespace-only-files=empty cannot be used with "
                "--normalize-empty-files=one-line"
            )
