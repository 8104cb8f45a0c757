"""Stable validation error codes and allowed-key sets for transformation configs."""

from __future__ import annotations

TRF001: str = "TRF001"  # config file not found
TRF002: str = "TRF002"  # invalid YAML parse
TRF003: str = "TRF003"  # top-level value is not a mapping
TRF004: str = "TRF004"  # unknown key
TRF005: str = "TRF005"  # invalid value type
TRF006: str = "TRF006"  # value out of range
TRF007: str = "TRF007"  # malformed transformation key
TRF008: str = "TRF008"  # entity type not in vocabulary
TRF009: str = "TRF009"  # conflicting `none` transformation
TRF010: str = "TRF010"  # invalid nested mapping
TRF011: str = "TRF011"  # duplicate mapping key

ALL_TRF_CODES: tuple[str, ...] = (
    TRF001,
    TRF002,
    TRF003,
    TRF004,
    TRF005,
    TRF006,
    TRF007,
    TRF008,
    TRF009,
    TRF010,
    TRF011,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"options", "transformations"})
ALLOWED_OPTION_KEYS: frozenset[str] = frozenset({"confidence"})
ALLOWED_RULE_KEYS: frozenset[str] = frozenset({"priority", "confidence", "exclude", "ttl"})
