#!/usr/bin/env python3
"""
WhitespaceForge

A cross-platform Python tool to format whitespace in text files, or to
check whether they are formatted.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from . import __version__
from .changes import Change
from .discover import compile_regular_expression, exclude_files, list_files
from .errors import FileReadError, FileWriteError, LogFileError, WhitespaceForgeError
from .formatter import format_content
from .line_endings import NewLineMarkerMode
from .options import NonStandardWhitespaceMode, Options, TrivialFileMode

EXIT_OK = 0
EXIT_CHANGES_NEEDED = 1
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("WhitespaceForge")


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Send log records to stderr and, optionally, append them to a file."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a")
        except OSError as e:
            raise LogFileError(log_file) from e
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)


def process_file(file_path: str, options: Options, check_only: bool) -> List[Change]:
    """
    Format or check a single file.

    Returns the changes that have been made, or would have been made when
    check_only is set. The file is rewritten in place only if it changes.
    """
    try:
        with open(file_path, "rb") as f:
            data: bytes = f.read()
    except OSError as e:
        raise FileReadError(file_path) from e

    output, changes = format_content(data, options, check_only)

    if output is not None:
        try:
            with open(file_path, "wb") as f:
                f.write(output)
        except OSError as e:
            raise FileWriteError(file_path) from e
        logger.debug("Updated file: %s", file_path)
    elif not changes:
        logger.debug("No changes needed for file: %s", file_path)

    return changes


def report_changes(file_path: str, changes: List[Change], check_only: bool) -> None:
    if check_only:
        logger.info("File would be reformatted: %s", file_path)
    else:
        logger.info("Reformatted file: %s", file_path)
    for change in changes:
        logger.info("  %s", change.to_string(check_only))


def process_files(files: List[str], options: Options, check_only: bool) -> int:
    """Process files one after another. Returns the number of changed files."""
    changed_count: int = 0

    with logging_redirect_tqdm(loggers=[logger]):
        for file_path in tqdm(files, desc="Processing files", unit="file", disable=None):
            changes: List[Change] = process_file(file_path, options, check_only)
            if changes:
                changed_count += 1
                report_changes(file_path, changes, check_only)

    return changed_count


def format_elapsed_time(execution_time: float) -> str:
    if execution_time < 60:
        return f"{execution_time:.2f} seconds"
    if execution_time < 3600:
        minutes = int(execution_time // 60)
        seconds = execution_time % 60
        return f"{minutes} minute{'s' if minutes != 1 else ''} {seconds:.2f} seconds"
    hours = int(execution_time // 3600)
    minutes = int((execution_time % 3600) // 60)
    seconds = execution_time % 60
    return (
        f"{hours} hour{'s' if hours != 1 else ''} "
        f"{minutes} minute{'s' if minutes != 1 else ''} "
        f"{seconds:.2f} seconds"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="whitespace-forge",
        description="Whitespace formatter and format checker for text files "
        "and source code files.",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Files and/or directories to process. "
        "Files in directories are discovered recursively.",
    )
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Do not format files. Only report which files would be formatted. "
        "Exit code is non-zero if formatting is required.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Follow symbolic links when searching for files.",
    )
    parser.add_argument(
        "--exclude",
        default=None,
        help="Regular expression that specifies which files to exclude. "
        "It is matched against the path of each file "
        "(e.g. '(\\.jpeg|\\.png)$' or '\\.git/').",
    )
    parser.add_argument(
        "--new-line-marker",
        choices=[mode.value for mode in NewLineMarkerMode],
        default=NewLineMarkerMode.AUTO.value,
        help="New line marker to use. 'auto' uses the most common marker "
        "in each file, or '\\n' if the file has none (default: auto).",
    )
    eof_group = parser.add_mutually_exclusive_group()
    eof_group.add_argument(
        "--add-new-line-marker-at-end-of-file",
        action="store_true",
        help="Add a new line marker at the end of the file if it is missing.",
    )
    eof_group.add_argument(
        "--remove-new-line-marker-from-end-of-file",
        action="store_true",
        help="Remove the new line marker(s) from the end of the file. "
        "Implies --remove-trailing-empty-lines.",
    )
    parser.add_argument(
        "--normalize-new-line-markers",
        action="store_true",
        help="Make new line markers the same within each file.",
    )
    parser.add_argument(
        "--remove-trailing-whitespace",
        action="store_true",
        help="Remove whitespace at the end of each line.",
    )
    parser.add_argument(
        "--remove-leading-empty-lines",
        action="store_true",
        help="Remove empty lines at the beginning of each file.",
    )
    parser.add_argument(
        "--remove-trailing-empty-lines",
        action="store_true",
        help="Remove empty lines at the end of each file.",
    )
    parser.add_argument(
        "--normalize-empty-files",
        choices=[mode.value for mode in TrivialFileMode],
        default=TrivialFileMode.IGNORE.value,
        help="Replace files of zero length (default: ignore).",
    )
    parser.add_argument(
        "--normalize-whitespace-only-files",
        choices=[mode.value for mode in TrivialFileMode],
        default=TrivialFileMode.IGNORE.value,
        help="Replace files consisting of whitespace only (default: ignore).",
    )
    parser.add_argument(
        "--normalize-non-standard-whitespace",
        choices=[mode.value for mode in NonStandardWhitespaceMode],
        default=NonStandardWhitespaceMode.IGNORE.value,
        help="Replace or remove the non-standard whitespace characters "
        "'\\v' and '\\f' (default: ignore).",
    )
    parser.add_argument(
        "--replace-tabs-with-spaces",
        type=int,
        default=-1,
        help="Replace each tab with this many spaces. 0 removes tabs, "
        "a negative number keeps them (default: -1).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--log-file", default=None, help="Also append log output to this file")
    parser.add_argument(
        "--version",
        action="version",
        version=f"WhitespaceForge v{__version__}",
        help="Show program version and exit",
    )
    return parser


def options_from_arguments(args: argparse.Namespace) -> Options:
    """Build validated formatting options from parsed arguments."""
    options = Options(
        add_new_line_marker_at_end_of_file=args.add_new_line_marker_at_end_of_file,
        remove_new_line_marker_from_end_of_file=args.remove_new_line_marker_from_end_of_file,
        normalize_new_line_markers=args.normalize_new_line_markers,
        new_line_marker=NewLineMarkerMode(args.new_line_marker),
        remove_trailing_whitespace=args.remove_trailing_whitespace,
        remove_leading_empty_lines=args.remove_leading_empty_lines,
        # --remove-new-line-marker-from-end-of-file implies this option.
        remove_trailing_empty_lines=(
            args.remove_trailing_empty_lines
            or args.remove_new_line_marker_from_end_of_file
        ),
        normalize_empty_files=TrivialFileMode(args.normalize_empty_files),
        normalize_whitespace_only_files=TrivialFileMode(
            args.normalize_whitespace_only_files
        ),
        replace_tabs_with_spaces=args.replace_tabs_with_spaces,
        normalize_non_standard_whitespace=NonStandardWhitespaceMode(
            args.normalize_non_standard_whitespace
        ),
    )
    options.validate()
    return options


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        configure_logging(args.verbose, args.log_file)
        logger.debug("WhitespaceForge v%s", __version__)
        options: Options = options_from_arguments(args)
        logger.debug("Options: %s", options)

        start_time: float = time.time()

        regex = compile_regular_expression(args.exclude)
        files: List[str] = exclude_files(list_files(args.paths, args.follow_symlinks), regex)

        if not files:
            logger.warning("No matching files found.")
            return EXIT_OK

        logger.debug("Found %d files to process.", len(files))

        changed_count: int = process_files(files, options, args.check_only)
        unchanged_count: int = len(files) - changed_count
        execution_time: float = time.time() - start_time

        if args.check_only:
            logger.info(
                "%d file(s) would be reformatted, %d file(s) would be left unchanged.",
                changed_count,
                unchanged_count,
            )
        else:
            logger.info(
                "%d file(s) reformatted, %d file(s) left unchanged.",
                changed_count,
                unchanged_count,
            )
        logger.debug("Done in %s.", format_elapsed_time(execution_time))

        if args.check_only and changed_count > 0:
            return EXIT_CHANGES_NEEDED
        return EXIT_OK
    except WhitespaceForgeError as e:
        logger.error("%s", e)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user.")
        return EXIT_INTERRUPTED
    except Exception as e:  # pylint: disable=broad-exception-caught
        logger.error("An unexpected error occurred: %s", str(e))
        if logger.level <= logging.DEBUG:
            import traceback  # pylint: disable=import-outside-toplevel

            logger.debug("Traceback: %s", traceback.format_exc())
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
