"""File metadata and content loading."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from context_cli.errors import BinaryContentNotSupported, FileDoesNotExist, PathExistsButNotFile
from context_cli.hasher import hash_content

logger = logging.getLogger(__name__)


def _timestamp(value: float | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


@dataclass(frozen=True)
class FileMetadata:
    """Filesystem facts about a regular file.

    ``modified`` and ``created`` are ``None`` when the platform does not
    report them.
    """

    filename: str
    is_symlink: bool = False
    modified: datetime | None = None
    created: datetime | None = None

    def load_content(self) -> FileContent:
        """Upgrade to a ``FileContent`` holding the file's text and hash."""
        return load_content(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "filename": self.filename,
            "is_symlink": self.is_symlink,
            "modified": self.modified.isoformat() if self.modified else None,
            "created": self.created.isoformat() if self.created else None,
        }


@dataclass(frozen=True)
class FileContent:
    """A file's metadata together with its text and the hash of that text."""

    metadata: FileMetadata
    content: str
    hash: int

    @classmethod
    def from_text(cls, metadata: FileMetadata, content: str) -> FileContent:
        return cls(metadata=metadata, content=content, hash=hash_content(content))


def stat_path(path: str | os.PathLike[str]) -> FileMetadata:
    """Resolve *path* to ``FileMetadata``.

    Symlinks are followed; the link itself is reported via ``is_symlink``.

    Raises:
        FileDoesNotExist: If *path* cannot be stat'ed.
        PathExistsButNotFile: If *path* exists but is not a regular file.
    """
    filename = os.fspath(path)
    try:
        st = os.stat(filename)
    except (OSError, ValueError) as exc:
        raise FileDoesNotExist(filename) from exc

    if not stat.S_ISREG(st.st_mode):
        raise PathExistsButNotFile(filename)

    try:
        is_symlink = stat.S_ISLNK(os.lstat(filename).st_mode)
    except OSError:
        is_symlink = False

    return FileMetadata(
        filename=filename,
        is_symlink=is_symlink,
        modified=_timestamp(st.st_mtime),
        created=_timestamp(getattr(st, "st_birthtime", None)),
    )


def load_content(metadata: FileMetadata) -> FileContent:
    """Read the file described by *metadata* as UTF-8 text.

    Line endings are kept as they are on disk.

    Raises:
        PathExistsButNotFile: If the file cannot be read.
        BinaryContentNotSupported: If the content is not UTF-8 text.
    """
    try:
        content = Path(metadata.filename).read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BinaryContentNotSupported(metadata.filename) from exc
    except OSError as exc:
        raise PathExistsButNotFile(metadata.filename, reason=exc.strerror) from exc

    if "\x00" in content:
        raise BinaryContentNotSupported(metadata.filename)

    logger.debug("Loaded %d characters from %s", len(content), metadata.filename)
    return FileContent.from_text(metadata, content)
