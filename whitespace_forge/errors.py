"""
Errors that abort a WhitespaceForge run.

Every error is fatal: the command line tool reports it and stops without
touching any further files.
"""


class WhitespaceForgeError(Exception):
    """Base class for all errors raised by WhitespaceForge."""


class InputNotFoundError(WhitespaceForgeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class DirectoryReadError(WhitespaceForgeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to read directory: {path}")
        self.path = path


class DirectoryEntryReadError(WhitespaceForgeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Failed to read an entry in directory: {path}")
        self.path = path


class FileReadError(WhitespaceForgeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot read file: {path}")
        self.path = path


class FileWriteError(WhitespaceForgeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot write file: {path}")
        self.path = path


class InvalidPatternError(WhitespaceForgeError):
    def __init__(self, pattern: str) -> None:
        super().__init__(f"Invalid regular expression: {pattern}")
        self.pattern = pattern


class InvalidConfigurationError(WhitespaceForgeError):
    """Raised when two options cannot be used together."""


class LogFileError(WhitespaceForgeError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Cannot open log file: {path}")
        self.path = path
