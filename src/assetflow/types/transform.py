"""Typed structures for transformation rules and their defaults."""

from __future__ import annotations

from dataclasses import dataclass

from assetflow.constants.transform import DEFAULT_CONFIDENCE, NONE_TARGET, WILDCARD_TARGET


@dataclass(frozen=True)
class Options:
    """Process-wide defaults applied to rules that omit a field."""

    confidence: int = DEFAULT_CONFIDENCE


@dataclass(frozen=True)
class RawRule:
    """A rule body as written in the document.

    ``None`` means the field was absent, which is not the same as an explicit ``0``.
    """

    priority: int | None = None
    confidence: int | None = None
    exclude: tuple[str, ...] = ()
    ttl: int | None = None


@dataclass(frozen=True)
class Rule:
    """A validated transformation rule with normalized entity types."""

    source: str
    target: str
    confidence: int
    priority: int | None = None
    exclude: frozenset[str] = frozenset()
    ttl: int | None = None

    @property
    def is_wildcard(self) -> bool:
        return self.target == WILDCARD_TARGET

    @property
    def is_none(self) -> bool:
        return self.target == NONE_TARGET

    @property
    def precedence(self) -> tuple[bool, int]:
        """Sort key: lower priority first, unranked rules last."""
        return (self.priority is None, self.priority if self.priority is not None else 0)
