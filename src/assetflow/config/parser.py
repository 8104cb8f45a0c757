"""Conversion of a parsed YAML document into options and raw rules.

This is the boundary where absent fields become ``None``. Nothing here
applies defaults; that happens once, in :func:`validate_rules`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypeAlias

from assetflow.constants.transform import MAX_CONFIDENCE, MIN_CONFIDENCE
from assetflow.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_OPTION_KEYS,
    ALLOWED_RULE_KEYS,
)
from assetflow.exceptions import ConfigError, InvalidRuleFieldError
from assetflow.types.transform import Options, RawRule

FieldProblem: TypeAlias = tuple[Literal["type", "range"], str]

INT_FIELD_BOUNDS: dict[str, tuple[int | None, int | None]] = {
    "confidence": (MIN_CONFIDENCE, MAX_CONFIDENCE),
    "priority": (None, None),
    "ttl": (0, None),
}


def int_field_problem(field: str, value: Any) -> FieldProblem | None:
    """Describe why ``value`` is not acceptable for an integer field, if it is not."""
    if isinstance(value, bool) or not isinstance(value, int):
        return "type", f"`{field}` must be an integer, got {type(value).__name__}"
    minimum, maximum = INT_FIELD_BOUNDS[field]
    if minimum is not None and value < minimum:
        return "range", f"`{field}` must be >= {minimum}, got {value}"
    if maximum is not None and value > maximum:
        return "range", f"`{field}` must be <= {maximum}, got {value}"
    return None


def is_string_list(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value)


def parse_document(document: Any) -> tuple[Options, dict[str, RawRule]]:
    """Split a parsed config document into :class:`Options` and raw rules keyed by original key."""
    if document is None:
        document = {}
    if not isinstance(document, Mapping):
        raise ConfigError(f"transformation config must be a mapping, got {type(document).__name__}")

    unknown = sorted(str(key) for key in document if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"unknown top-level keys: {unknown}")

    options = parse_options(document.get("options"))

    transformations = document.get("transformations")
    if transformations is None:
        transformations = {}
    if not isinstance(transformations, Mapping):
        raise ConfigError("transformations must be a mapping")

    raw_rules = {key: parse_rule(key, body) for key, body in transformations.items()}
    return options, raw_rules


def parse_options(raw: Any) -> Options:
    """Parse the ``options`` block; an absent block yields the built-in defaults."""
    if raw is None:
        return Options()
    if not isinstance(raw, Mapping):
        raise ConfigError("options must be a mapping")

    for key in raw:
        if key not in ALLOWED_OPTION_KEYS:
            raise InvalidRuleFieldError("options", str(key), "unknown option")

    confidence = _optional_int("options", "confidence", raw.get("confidence"))
    if confidence is None:
        return Options()
    return Options(confidence=confidence)


def parse_rule(key: Any, body: Any) -> RawRule:
    """Parse one rule body, keeping absent optional fields as ``None``."""
    label = str(key)
    if body is None:
        return RawRule()
    if not isinstance(body, Mapping):
        raise ConfigError(f"transformation {label!r} must be a mapping")

    for field in body:
        if field not in ALLOWED_RULE_KEYS:
            raise InvalidRuleFieldError(label, str(field), "unknown field")

    exclude = body.get("exclude")
    if exclude is None:
        exclude = []
    if not is_string_list(exclude):
        raise InvalidRuleFieldError(label, "exclude", "must be a list of strings")
    if any(not name.strip() for name in exclude):
        raise InvalidRuleFieldError(label, "exclude", "entries must be non-empty entity type names")

    return RawRule(
        priority=_optional_int(label, "priority", body.get("priority")),
        confidence=_optional_int(label, "confidence", body.get("confidence")),
        exclude=tuple(exclude),
        ttl=_optional_int(label, "ttl", body.get("ttl")),
    )


def _optional_int(label: str, field: str, value: Any) -> int | None:
    if value is None:
        return None
    problem = int_field_problem(field, value)
    if problem is not None:
        raise InvalidRuleFieldError(label, field, problem[1])
    return value
