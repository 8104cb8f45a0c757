"""Fail-fast validation of raw transformation rules into a :class:`RuleSet`."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Container, Mapping
from typing import TypeAlias

from assetflow.config.keys import normalize_type, split_key
from assetflow.config.model import RuleSet
from assetflow.constants.transform import NONE_TARGET, RESERVED_TARGETS, WILDCARD_TARGET
from assetflow.exceptions import ConflictingNoneTransformationError, NonCompliantTypeError
from assetflow.types.transform import Options, RawRule, Rule
from assetflow.vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)

_ParsedRule: TypeAlias = tuple[str, str, str, RawRule]


def validate_rules(
    raw_rules: Mapping[str, RawRule],
    options: Options,
    vocabulary: Container[str] = DEFAULT_VOCABULARY,
) -> RuleSet:
    """Validate every raw rule and return an immutable :class:`RuleSet`.

    The first problem found aborts validation; no partial rule set is ever
    returned. Rules without an explicit confidence take ``options.confidence``.

    Raises:
        InvalidKeyFormatError: A key is not ``Source->Target``.
        NonCompliantTypeError: A source or concrete target is not in ``vocabulary``.
        ConflictingNoneTransformationError: A ``none`` rule shares its source
            with other rules.
    """
    parsed: list[_ParsedRule] = []
    for key, raw in raw_rules.items():
        source, target = split_key(key)
        if target not in RESERVED_TARGETS and target not in vocabulary:
            raise NonCompliantTypeError(key, "target", target)
        if source not in vocabulary:
            raise NonCompliantTypeError(key, "source", source)
        parsed.append((key, source, target, raw))

    _check_none_conflicts(parsed)

    rules: dict[str, Rule] = {}
    for key, source, target, raw in parsed:
        exclude = frozenset(normalize_type(name) for name in raw.exclude)
        if exclude:
            _warn_on_exclude(key, target, exclude, vocabulary)
        rule = Rule(
            source=source,
            target=target,
            confidence=raw.confidence if raw.confidence is not None else options.confidence,
            priority=raw.priority,
            exclude=exclude,
            ttl=raw.ttl,
        )
        rules[key] = rule
        logger.debug(
            "Accepted transformation %s: %s -> %s (priority=%s, confidence=%d)",
            key,
            rule.source,
            rule.target,
            rule.priority,
            rule.confidence,
        )

    rule_set = RuleSet(options=options, rules=rules)
    logger.info("Loaded %d transformation rules for %d source types", len(rule_set), len(rule_set.sources))
    return rule_set


def _check_none_conflicts(parsed: list[_ParsedRule]) -> None:
    """Reject any source that mixes a ``none`` rule with other rules."""
    groups: dict[str, list[tuple[str, str]]] = defaultdict(list)
    for key, source, target, _ in parsed:
        groups[source].append((key, target))

    for source, members in groups.items():
        if len(members) > 1 and any(target == NONE_TARGET for _, target in members):
            raise ConflictingNoneTransformationError(source, tuple(key for key, _ in members))


def _warn_on_exclude(key: str, target: str, exclude: frozenset[str], vocabulary: Container[str]) -> None:
    if target != WILDCARD_TARGET:
        logger.warning("Transformation %s: `exclude` only applies to wildcard targets and is ignored", key)
        return
    unknown = sorted(name for name in exclude if name not in vocabulary)
    if unknown:
        logger.warning("Transformation %s excludes unknown entity types: %s", key, ", ".join(unknown))
