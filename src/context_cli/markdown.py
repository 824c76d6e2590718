"""Markdown documents split into frontmatter and prose.

A ``MarkdownDocument`` consists of two major parts:

1. **Frontmatter**: optional structured data at the top of a page.
2. **Prose**: the real content of the page.

Usage::

    from context_cli.files import stat_path
    from context_cli.markdown import MarkdownDocument

    doc = MarkdownDocument.from_file_content(stat_path("notes.md").load_content())
    doc.frontmatter.title if doc.frontmatter else None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from context_cli.files import FileContent, FileMetadata
from context_cli.frontmatter import (
    Frontmatter,
    exclude_frontmatter,
    has_frontmatter,
    parse_frontmatter,
)
from context_cli.hasher import hash_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prose:
    """Body text of a document and the hash of that text."""

    content: str
    hash: int

    @classmethod
    def from_text(cls, content: str) -> Prose:
        return cls(content=content, hash=hash_content(content))

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "hash": self.hash}


def split_frontmatter(raw: str) -> tuple[Prose, Frontmatter | None]:
    """Separate *raw* markdown into its prose and optional frontmatter.

    Raises:
        FrontmatterDecodeError: If a frontmatter block is present but invalid.
    """
    frontmatter = parse_frontmatter(raw) if has_frontmatter(raw) else None
    prose = Prose.from_text(exclude_frontmatter(raw))

    logger.debug("Split markdown content: frontmatter=%s prose=%d chars", frontmatter, len(prose.content))
    return prose, frontmatter


@dataclass
class MarkdownDocument:
    """A markdown page with its frontmatter separated from its prose.

    ``structure`` is reserved for a heading outline and is always ``None``.
    ``file`` is set when the document was loaded from disk; the raw file
    content itself is not kept.
    """

    has_frontmatter: bool
    prose: Prose
    frontmatter: Frontmatter | None = None
    structure: None = None
    file: FileMetadata | None = None

    @classmethod
    def from_raw_text(cls, raw: str) -> MarkdownDocument:
        """Build a document directly from markdown text.

        Raises:
            FrontmatterDecodeError: If the frontmatter block is invalid.
        """
        prose, frontmatter = split_frontmatter(raw)
        return cls(
            has_frontmatter=frontmatter is not None,
            frontmatter=frontmatter,
            prose=prose,
        )

    @classmethod
    def from_file_content(cls, file_content: FileContent) -> MarkdownDocument:
        """Build a document from a loaded file, keeping only its metadata.

        Raises:
            FrontmatterDecodeError: If the frontmatter block is invalid.
        """
        prose, frontmatter = split_frontmatter(file_content.content)
        return cls(
            has_frontmatter=frontmatter is not None,
            frontmatter=frontmatter,
            prose=prose,
            file=file_content.metadata,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_frontmatter": self.has_frontmatter,
            "frontmatter": self.frontmatter.to_dict() if self.frontmatter else None,
            "prose": self.prose.to_dict(),
            "structure": self.structure,
            "file": self.file.to_dict() if self.file else None,
        }
