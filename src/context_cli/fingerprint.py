"""Classify raw target strings by the kind of content they point at.

Matchers are evaluated in declaration order and the first match wins.
Targets that match nothing are ``UNKNOWN``, which is a warning, not an
error.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class FingerprintKind(enum.Enum):
    """Every kind of target this tool can give context on."""

    MARKDOWN = "markdown"
    HTML = "html"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Matcher:
    """A pattern paired with the kind it identifies."""

    kind: FingerprintKind
    pattern: re.Pattern[str]

    def is_match(self, user_input: str) -> bool:
        return self.pattern.search(user_input) is not None


@dataclass(frozen=True)
class Target:
    """A user-supplied target string and its classification."""

    user_input: str
    kind: FingerprintKind

    def to_dict(self) -> dict[str, str]:
        return {"user_input": self.user_input, "kind": self.kind.value}


DEFAULT_MATCHERS: tuple[Matcher, ...] = (
    Matcher(FingerprintKind.MARKDOWN, re.compile(r"\w\.md\Z")),
    Matcher(FingerprintKind.HTML, re.compile(r"\w\.html?\Z")),
)


def classify(user_input: str, matchers: Sequence[Matcher] = DEFAULT_MATCHERS) -> FingerprintKind:
    """Return the kind of the first matcher that accepts *user_input*."""
    for matcher in matchers:
        if matcher.is_match(user_input):
            return matcher.kind
    return FingerprintKind.UNKNOWN


def matches(user_input: str, matchers: Sequence[Matcher] = DEFAULT_MATCHERS) -> list[FingerprintKind]:
    """Return every kind whose matcher accepts *user_input*, in order.

    ``classify`` stops at the first hit; this is useful when debugging
    overlapping patterns.
    """
    return [m.kind for m in matchers if m.is_match(user_input)]


def fingerprint(user_input: str, matchers: Sequence[Matcher] = DEFAULT_MATCHERS) -> Target:
    return Target(user_input=user_input, kind=classify(user_input, matchers))


def warn_about_unknown(targets: Iterable[Target]) -> bool:
    """Log a warning for each unrecognized target.

    Returns ``True`` if any target was ``UNKNOWN``.
    """
    found = False
    for target in targets:
        if target.kind is FingerprintKind.UNKNOWN:
            logger.warning("'%s' was not recognized and will be ignored!", target.user_input)
            found = True
    return found
