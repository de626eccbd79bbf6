"""
WhitespaceForge - A cross-platform Python utility for formatting whitespace in text files.

This package provides functionality to:
- Normalize line endings to LF, CR or CRLF (or the most common one in each file)
- Add or remove the new line marker at the end of the file
- Remove trailing whitespace from lines
- Remove empty lines from the beginning and the end of the file
- Replace or remove tabs and non-standard whitespace ('\\v', '\\f')
- Normalize empty and whitespace-only files
- Report the changes, or only check whether changes are needed
"""

__version__ = "1.0.0"
