"""Reachability queries over a validated :class:`RuleSet`."""

from __future__ import annotations

import logging

from assetflow.config.keys import normalize_type
from assetflow.config.model import MatchSet, RuleSet
from assetflow.exceptions import NoMatchError

logger = logging.getLogger(__name__)


def check_transformations(rule_set: RuleSet, source: str, *candidates: str) -> MatchSet:
    """Return the candidates reachable from ``source`` under ``rule_set``.

    Every rule whose source matches contributes: a concrete target adds itself
    when it is among the candidates, a wildcard adds every candidate outside
    its ``exclude`` set and a ``none`` rule adds nothing. Only reads
    ``rule_set``, so concurrent callers need no locking.

    Raises:
        NoMatchError: No candidate is reachable.
    """
    wanted_source = normalize_type(source)
    wanted = tuple(name for name in (normalize_type(c) for c in candidates) if name)

    matched: set[str] = set()
    for rule in rule_set.rules.values():
        if rule.source != wanted_source or rule.is_none:
            continue
        if rule.is_wildcard:
            matched.update(name for name in wanted if name not in rule.exclude)
        elif rule.target in wanted:
            matched.add(rule.target)

    if not matched:
        logger.debug("No transformations from %s to any of [%s]", wanted_source, ", ".join(wanted))
        raise NoMatchError(wanted_source, wanted)
    return MatchSet(frozenset(matched))
