"""Errors raised while loading and decoding targets.

Every error derives from ``ContextError`` so the dispatcher can isolate a
failing target without hiding programming errors.
"""

from __future__ import annotations


class ContextError(Exception):
    """Base class for failures tied to a single target."""


class FileDoesNotExist(ContextError):
    """The path could not be stat'ed."""

    def __init__(self, path: str) -> None:
        super().__init__(f'The file "{path}" does not exist!')
        self.path = path


class PathExistsButNotFile(ContextError):
    """The path exists but cannot be treated as a regular text file."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = f'Attempt to treat "{path}" as a file failed! The path exists but is not a file'
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class BinaryContentNotSupported(PathExistsButNotFile):
    """The file exists but its content is not UTF-8 text."""

    def __init__(self, path: str) -> None:
        super().__init__(path, reason="binary content is not supported")


class FrontmatterDecodeError(ContextError):
    """The frontmatter block is missing, malformed, or has mistyped fields."""
