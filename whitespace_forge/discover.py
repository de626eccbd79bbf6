"""
Discovery of the files to format.
"""

import os
import re
import stat
from typing import Iterable, List, Optional, Pattern, Set

from .errors import (
    DirectoryEntryReadError,
    DirectoryReadError,
    InputNotFoundError,
    InvalidPatternError,
)


def _raise_directory_error(error: OSError) -> None:
    raise DirectoryReadError(str(error.filename)) from error


def _is_regular_file(file_path: str) -> bool:
    try:
        mode: int = os.stat(file_path).st_mode
    except OSError as e:
        raise DirectoryEntryReadError(file_path) from e
    return stat.S_ISREG(mode)


def list_files(paths: Iterable[str], follow_symlinks: bool = False) -> List[str]:
    """
    List all files in a collection of paths (files and/or directories).

    Directories are searched recursively. Symbolic links, both the given
    paths and the ones found in directories, are skipped unless
    follow_symlinks is set.
    """
    files: Set[str] = set()

    for path in paths:
        if not os.path.lexists(path):
            raise InputNotFoundError(path)
        if os.path.islink(path) and not follow_symlinks:
            continue
        if not os.path.exists(path):
            raise InputNotFoundError(path)

        if os.path.isfile(path):
            files.add(os.path.normpath(path))
            continue
        if not os.path.isdir(path):
            continue

        for root, dirs, filenames in os.walk(
            path, onerror=_raise_directory_error, followlinks=follow_symlinks
        ):
            if not follow_symlinks:
                dirs[:] = [d for d in dirs if not os.path.islink(os.path.join(root, d))]

            for filename in filenames:
                file_path: str = os.path.join(root, filename)
                if os.path.islink(file_path) and not follow_symlinks:
                    continue
                if _is_regular_file(file_path):
                    files.add(os.path.normpath(file_path))

    return sorted(files)


def compile_regular_expression(pattern: Optional[str]) -> Optional[Pattern[str]]:
    """Compile the exclusion pattern. None means exclude nothing."""
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPatternError(pattern) from e


def exclude_files(files: Iterable[str], regex: Optional[Pattern[str]]) -> List[str]:
    """Drop files whose path matches the regular expression anywhere."""
    if regex is None:
        return list(files)
    return [file_path for file_path in files if not regex.search(file_path)]
