"""
The whitespace formatting algorithm.

The input is scanned once, byte by byte, and written to a Writer. Trailing
whitespace and trailing empty lines are first written and later deleted by
rewinding the writer to a remembered position, so the scan never looks
ahead more than one byte.
"""

from typing import List, Optional, Tuple

from .changes import Change, ChangeType
from .line_endings import (
    CARRIAGE_RETURN,
    FORM_FEED,
    LINE_FEED,
    SPACE,
    TAB,
    VERTICAL_TAB,
    WHITESPACE,
    LineEnding,
    resolve_line_ending,
)
from .options import NonStandardWhitespaceMode, Options, TrivialFileMode
from .writers import BufferWriter, CountingWriter, Writer


def is_whitespace_only(data: bytes) -> bool:
    """Check whether the data consists of whitespace only (true for empty data)."""
    return all(char in WHITESPACE for char in data)


def _format_trivial_file(
    data: bytes, options: Options, new_line_marker: LineEnding, writer: Writer
) -> List[Change]:
    """Handle a file that is empty or consists of whitespace only."""
    if not data:
        if options.normalize_empty_files is TrivialFileMode.ONE_LINE:
            writer.write_bytes(new_line_marker.to_bytes())
            return [Change(1, ChangeType.REPLACED_EMPTY_FILE_WITH_ONE_LINE)]
        return []

    mode: TrivialFileMode = options.normalize_whitespace_only_files
    if mode is TrivialFileMode.EMPTY:
        return [Change(1, ChangeType.REPLACED_WHITESPACE_ONLY_FILE_WITH_EMPTY_FILE)]
    if mode is TrivialFileMode.ONE_LINE:
        writer.write_bytes(new_line_marker.to_bytes())
        if data == new_line_marker.to_bytes():
            return []
        return [Change(1, ChangeType.REPLACED_WHITESPACE_ONLY_FILE_WITH_ONE_LINE)]
    writer.write_bytes(data)
    return []


def modify_content(  # pylint: disable=too-many-branches,too-many-statements,too-many-locals
    data: bytes, options: Options, writer: Writer
) -> List[Change]:
    """
    Format the data according to the options and write the result to the writer.

    Returns the list of changes in the order they were made. Line numbers
    refer to the output.
    """
    new_line_marker: LineEnding = resolve_line_ending(options.new_line_marker, data)

    if is_whitespace_only(data):
        return _format_trivial_file(data, options, new_line_marker, writer)

    changes: List[Change] = []
    length: int = len(data)
    i: int = 0

    # Incremented every time a new line marker is written.
    line_number: int = 1

    # Output position one byte past the last new line marker.
    last_end_of_line_including_eol_marker: int = 0

    # Output position one byte past the last non-whitespace character.
    last_non_whitespace: int = 0

    # Output positions one byte past the end of the last non-empty line,
    # excluding and including its new line marker.
    last_end_of_non_empty_line_excluding_eol_marker: int = 0
    last_end_of_non_empty_line_including_eol_marker: int = 0

    # 0 until the first non-empty line has been written.
    last_non_empty_line_number: int = 0

    removed_leading_empty_lines: bool = False

    while i < length:
        char: int = data[i]

        if char in (CARRIAGE_RETURN, LINE_FEED):
            line_ending: LineEnding
            if char == LINE_FEED:
                line_ending = LineEnding.LINUX
            elif i + 1 < length and data[i + 1] == LINE_FEED:
                line_ending = LineEnding.WINDOWS
                i += 1
            else:
                line_ending = LineEnding.MACOS

            end_of_content: int = max(
                last_non_whitespace, last_end_of_line_including_eol_marker
            )
            if options.remove_trailing_whitespace and end_of_content < writer.position:
                changes.append(Change(line_number, ChangeType.REMOVED_TRAILING_WHITESPACE))
                writer.rewind(end_of_content)

            is_empty_line: bool = (
                writer.position == last_end_of_line_including_eol_marker
            )
            last_end_of_line_excluding_eol_marker: int = writer.position

            if (
                options.remove_leading_empty_lines
                and is_empty_line
                and last_non_empty_line_number == 0
            ):
                if not removed_leading_empty_lines:
                    changes.append(Change(1, ChangeType.REMOVED_LEADING_EMPTY_LINES))
                    removed_leading_empty_lines = True
                i += 1
                continue

            if options.normalize_new_line_markers and line_ending is not new_line_marker:
                changes.append(
                    Change(
                        line_number,
                        ChangeType.REPLACED_NEW_LINE_MARKER,
                        old_line_ending=line_ending,
                        new_line_ending=new_line_marker,
                    )
                )
                writer.write_bytes(new_line_marker.to_bytes())
            else:
                writer.write_bytes(line_ending.to_bytes())
            last_end_of_line_including_eol_marker = writer.position

            if not is_empty_line:
                last_end_of_non_empty_line_excluding_eol_marker = (
                    last_end_of_line_excluding_eol_marker
                )
                last_end_of_non_empty_line_including_eol_marker = (
                    last_end_of_line_including_eol_marker
                )
                last_non_empty_line_number = line_number
            line_number += 1

        elif char == SPACE:
            writer.write(char)

        elif char == TAB:
            if options.replace_tabs_with_spaces < 0:
                writer.write(char)
            elif options.replace_tabs_with_spaces > 0:
                changes.append(
                    Change(
                        line_number,
                        ChangeType.REPLACED_TAB_WITH_SPACES,
                        spaces=options.replace_tabs_with_spaces,
                    )
                )
                writer.write_bytes(bytes([SPACE]) * options.replace_tabs_with_spaces)
            else:
                changes.append(Change(line_number, ChangeType.REMOVED_TAB))

        elif char in (VERTICAL_TAB, FORM_FEED):
            mode: NonStandardWhitespaceMode = options.normalize_non_standard_whitespace
            if mode is NonStandardWhitespaceMode.REPLACE_WITH_SPACE:
                writer.write(SPACE)
                changes.append(
                    Change(
                        line_number,
                        ChangeType.REPLACED_NONSTANDARD_WHITESPACE_BY_SPACE,
                        character=char,
                    )
                )
            elif mode is NonStandardWhitespaceMode.REMOVE:
                changes.append(
                    Change(
                        line_number,
                        ChangeType.REMOVED_NONSTANDARD_WHITESPACE,
                        character=char,
                    )
                )
            else:
                writer.write(char)

        else:
            writer.write(char)
            last_non_whitespace = writer.position

        i += 1

    # Trailing whitespace on the last line, which has no new line marker.
    # The line may be whitespace only, so never rewind past its start.
    end_of_last_line: int = max(last_non_whitespace, last_end_of_line_including_eol_marker)
    if options.remove_trailing_whitespace and end_of_last_line < writer.position:
        changes.append(Change(line_number, ChangeType.REMOVED_TRAILING_WHITESPACE))
        writer.rewind(end_of_last_line)

    if (
        options.remove_trailing_empty_lines
        and last_end_of_line_including_eol_marker == writer.position
        and last_end_of_non_empty_line_including_eol_marker < writer.position
    ):
        line_number = last_non_empty_line_number + 1
        last_end_of_line_including_eol_marker = (
            last_end_of_non_empty_line_including_eol_marker
        )
        changes.append(Change(line_number, ChangeType.REMOVED_TRAILING_EMPTY_LINES))
        writer.rewind(last_end_of_non_empty_line_including_eol_marker)

    if (
        options.add_new_line_marker_at_end_of_file
        and last_end_of_line_including_eol_marker < writer.position
    ):
        changes.append(
            Change(line_number, ChangeType.NEW_LINE_MARKER_ADDED_TO_END_OF_FILE)
        )
        writer.write_bytes(new_line_marker.to_bytes())
        last_end_of_line_including_eol_marker = writer.position
        line_number += 1

    if (
        options.remove_new_line_marker_from_end_of_file
        and last_end_of_line_including_eol_marker == writer.position
        and line_number >= 2
    ):
        line_number = last_non_empty_line_number
        changes.append(
            Change(line_number, ChangeType.NEW_LINE_MARKER_REMOVED_FROM_END_OF_FILE)
        )
        writer.rewind(last_end_of_non_empty_line_excluding_eol_marker)

    return changes


def format_content(
    data: bytes, options: Options, check_only: bool
) -> Tuple[Optional[bytes], List[Change]]:
    """
    Format the data in two passes.

    The first pass only counts bytes and collects the changes. The second
    pass, which materializes the output, runs only if the caller wants the
    output and there is something to change. Returns (None, changes) when no
    output was produced.
    """
    counting_writer = CountingWriter()
    changes: List[Change] = modify_content(data, options, counting_writer)
    if check_only or not changes:
        return None, changes

    output_writer = BufferWriter(capacity=counting_writer.maximum_position)
    modify_content(data, options, output_writer)
    return output_writer.getvalue(), changes
