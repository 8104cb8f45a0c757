"""Transformation config defaults, reserved tokens and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "transforms.yaml"

KEY_DELIMITER: str = "->"

WILDCARD_TARGET: str = "all"
NONE_TARGET: str = "none"
RESERVED_TARGETS: frozenset[str] = frozenset({WILDCARD_TARGET, NONE_TARGET})

DEFAULT_CONFIDENCE: int = 50
MIN_CONFIDENCE: int = 0
MAX_CONFIDENCE: int = 100

NO_MATCH_MESSAGE: str = "zero transformation matches in the session config"
