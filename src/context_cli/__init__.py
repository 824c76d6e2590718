"""Give context on files: classify targets and split markdown into frontmatter and prose.

Command line::

    context notes.md page.html --json

Library::

    from context_cli import fingerprint, process

    batch = process([fingerprint("notes.md"), fingerprint("missing.md")])
    for result in batch.results:
        print(result.document.prose.hash)
    for failure in batch.failures:
        print(failure.target.user_input, failure.error)
"""

from context_cli.dispatch import BatchResult, Dispatcher, process
from context_cli.errors import (
    BinaryContentNotSupported,
    ContextError,
    FileDoesNotExist,
    FrontmatterDecodeError,
    PathExistsButNotFile,
)
from context_cli.files import FileContent, FileMetadata, load_content, stat_path
from context_cli.fingerprint import FingerprintKind, Target, classify, fingerprint
from context_cli.frontmatter import Frontmatter
from context_cli.markdown import MarkdownDocument, Prose, split_frontmatter

__all__ = [
    "BatchResult",
    "Dispatcher",
    "process",
    "ContextError",
    "FileDoesNotExist",
    "PathExistsButNotFile",
    "BinaryContentNotSupported",
    "FrontmatterDecodeError",
    "FileMetadata",
    "FileContent",
    "stat_path",
    "load_content",
    "FingerprintKind",
    "Target",
    "classify",
    "fingerprint",
    "Frontmatter",
    "MarkdownDocument",
    "Prose",
    "split_frontmatter",
]
