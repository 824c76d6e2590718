"""Registry mapping target kinds to the handlers that process them."""

from __future__ import annotations

from collections.abc import Callable

from context_cli.fingerprint import FingerprintKind, Target
from context_cli.markdown import MarkdownDocument

Handler = Callable[[Target], MarkdownDocument | None]


class HandlerRegistry:
    """Registry mapping ``FingerprintKind`` values to handler callables."""

    def __init__(self) -> None:
        self._handlers: dict[FingerprintKind, Handler] = {}

    def register(self, kind: FingerprintKind, handler: Handler) -> None:
        """Register *handler* for *kind*, replacing any previous one."""
        self._handlers[kind] = handler

    def get(self, kind: FingerprintKind) -> Handler | None:
        """Return the handler for *kind*, or ``None`` if not registered."""
        return self._handlers.get(kind)

    def kinds(self) -> set[FingerprintKind]:
        """Return the set of kinds with a registered handler."""
        return set(self._handlers.keys())

    def __contains__(self, kind: FingerprintKind) -> bool:
        return kind in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
