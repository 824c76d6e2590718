"""Route classified targets to their handlers and collect the outcome.

Targets are processed one after another. A target that fails with a
``ContextError`` is recorded in ``BatchResult.failures`` and the batch
carries on; successes keep their input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from context_cli.errors import ContextError
from context_cli.files import stat_path
from context_cli.fingerprint import FingerprintKind, Target
from context_cli.markdown import MarkdownDocument
from context_cli.registry import HandlerRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TargetResult:
    """A successfully processed target. ``document`` is ``None`` for stubs."""

    target: Target
    document: MarkdownDocument | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target.to_dict(),
            "document": self.document.to_dict() if self.document else {},
        }


@dataclass(frozen=True)
class TargetFailure:
    target: Target
    error: ContextError

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target.to_dict(),
            "error": type(self.error).__name__,
            "message": str(self.error),
        }


@dataclass
class BatchResult:
    """Outcome of processing a batch of targets."""

    results: list[TargetResult] = field(default_factory=list)
    failures: list[TargetFailure] = field(default_factory=list)
    unknown: list[Target] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "failures": [f.to_dict() for f in self.failures],
            "unknown": [t.user_input for t in self.unknown],
        }


def markdown_handler(target: Target) -> MarkdownDocument:
    """Load *target* from disk and split it into a ``MarkdownDocument``."""
    logger.info("'%s' is being processed as a local Markdown file", target.user_input)
    file_content = stat_path(target.user_input).load_content()
    return MarkdownDocument.from_file_content(file_content)


def html_handler(target: Target) -> None:
    # HTML extraction is not implemented; the target yields an empty result.
    logger.info("'%s' is being processed as a local HTML file", target.user_input)
    return None


def default_registry() -> HandlerRegistry:
    registry = HandlerRegistry()
    registry.register(FingerprintKind.MARKDOWN, markdown_handler)
    registry.register(FingerprintKind.HTML, html_handler)
    return registry


class Dispatcher:
    """Process targets sequentially through a ``HandlerRegistry``.

    Args:
        registry: Handlers to route to. Defaults to ``default_registry()``.
    """

    def __init__(self, registry: HandlerRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()

    def process(self, targets: Iterable[Target]) -> BatchResult:
        """Run every known target through its handler.

        Targets without a handler, ``UNKNOWN`` included, are collected in
        ``BatchResult.unknown`` and never passed to a handler.
        """
        batch = BatchResult()
        for target in targets:
            handler = self.registry.get(target.kind)
            if target.kind is FingerprintKind.UNKNOWN or handler is None:
                batch.unknown.append(target)
                continue

            try:
                document = handler(target)
            except ContextError as exc:
                logger.warning("Failed to process '%s': %s", target.user_input, exc)
                batch.failures.append(TargetFailure(target=target, error=exc))
                continue

            batch.results.append(TargetResult(target=target, document=document))

        logger.debug(
            "Processed batch: %d results, %d failures, %d unknown",
            len(batch.results),
            len(batch.failures),
            len(batch.unknown),
        )
        return batch


def process(targets: Iterable[Target]) -> BatchResult:
    """Process *targets* with the default handlers."""
    return Dispatcher().process(targets)
