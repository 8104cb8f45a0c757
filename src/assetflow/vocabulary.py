"""Entity vocabulary consulted when validating transformation rules.

The engine never defines which entity types exist; it only asks a vocabulary
whether a name is known. Any object with a ``__contains__`` that accepts a
lower-cased type name can stand in for :class:`EntityVocabulary`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from assetflow.constants.vocabulary import DEFAULT_ENTITY_TYPES


class EntityVocabulary:
    """Immutable, case-insensitive set of entity type names."""

    __slots__ = ("_names",)

    def __init__(self, names: Iterable[str]) -> None:
        self._names: frozenset[str] = frozenset(name.strip().lower() for name in names if name.strip())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"EntityVocabulary({len(self._names)} types)"


DEFAULT_VOCABULARY: EntityVocabulary = EntityVocabulary(DEFAULT_ENTITY_TYPES)
