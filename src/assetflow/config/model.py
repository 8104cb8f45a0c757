"""Validated rule set and per-query match results."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from assetflow.config.keys import normalize_type
from assetflow.types.transform import Options, Rule


@dataclass(frozen=True, eq=False)
class RuleSet:
    """Validated transformation rules keyed by their original config key.

    Instances are read-only once built and safe to share between threads.
    """

    options: Options
    rules: Mapping[str, Rule] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def __len__(self) -> int:
        return len(self.rules)

    @property
    def sources(self) -> frozenset[str]:
        """Normalized source types that have at least one rule."""
        return frozenset(rule.source for rule in self.rules.values())

    def rules_for(self, source: str) -> tuple[Rule, ...]:
        """Return the rules for ``source`` ordered by precedence.

        Lower priority values come first, unranked rules last, and ties keep
        the order of their original keys.
        """
        wanted = normalize_type(source)
        ranked = sorted(
            ((rule.precedence, key, rule) for key, rule in self.rules.items() if rule.source == wanted),
            key=lambda item: (item[0], item[1]),
        )
        return tuple(rule for _, _, rule in ranked)


@dataclass(frozen=True)
class MatchSet:
    """Targets matched by a single transformation query."""

    targets: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "targets", frozenset(self.targets))

    def is_match(self, target: str) -> bool:
        """Return whether ``target`` was matched; always false on an empty set."""
        if not self.targets or not isinstance(target, str):
            return False
        return normalize_type(target) in self.targets

    def __contains__(self, target: object) -> bool:
        return isinstance(target, str) and self.is_match(target)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.targets))

    def __len__(self) -> int:
        return len(self.targets)
