"""Exceptions raised while validating and querying transformation rules."""

from __future__ import annotations

from assetflow.constants.transform import KEY_DELIMITER, NO_MATCH_MESSAGE
from assetflow.exceptions.base import AssetflowError
from assetflow.exceptions.config import ConfigError


class InvalidKeyFormatError(ConfigError):
    """Raised when a transformation key is not of the form ``Source->Target``."""

    def __init__(self, key: object, reason: str) -> None:
        self.key = key
        super().__init__(f"invalid transformation key {key!r}: {reason} (expected 'Source{KEY_DELIMITER}Target')")


class NonCompliantTypeError(ConfigError):
    """Raised when a rule names an entity type outside the vocabulary."""

    def __init__(self, key: str, side: str, entity_type: str) -> None:
        self.key = key
        self.side = side
        self.entity_type = entity_type
        super().__init__(f"transformation {key!r}: {side} {entity_type!r} is not a known entity type")


class ConflictingNoneTransformationError(ConfigError):
    """Raised when a ``none`` rule shares its source with other rules."""

    def __init__(self, source: str, keys: tuple[str, ...]) -> None:
        self.source = source
        self.keys = keys
        super().__init__(
            f"conflicting transformations for {source!r}: a 'none' transformation cannot be combined "
            f"with other transformations ({', '.join(keys)})"
        )


class InvalidRuleFieldError(ConfigError):
    """Raised when a rule or option field has the wrong type or range."""

    def __init__(self, key: str, field: str, message: str) -> None:
        self.key = key
        self.field = field
        super().__init__(f"{key}.{field}: {message}")


class NoMatchError(AssetflowError, LookupError):
    """Raised when a query finds no reachable target among the candidates.

    This is an expected outcome at query time: callers skip the edge.
    """

    def __init__(self, source: str, candidates: tuple[str, ...]) -> None:
        self.source = source
        self.candidates = candidates
        super().__init__(NO_MATCH_MESSAGE)
