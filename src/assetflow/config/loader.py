"""Loading transformation configs from YAML text and files."""

from __future__ import annotations

from collections.abc import Container
from pathlib import Path
from typing import Any

import yaml

from assetflow.config.model import RuleSet
from assetflow.config.normalizer import validate_rules
from assetflow.config.parser import parse_document
from assetflow.exceptions import ConfigError
from assetflow.io import load_yaml_file, load_yaml_text
from assetflow.vocabulary import DEFAULT_VOCABULARY


def build_rule_set(document: Any, *, vocabulary: Container[str] = DEFAULT_VOCABULARY) -> RuleSet:
    """Validate an already-parsed config document into a :class:`RuleSet`."""
    options, raw_rules = parse_document(document)
    return validate_rules(raw_rules, options, vocabulary)


def load_rule_set_text(text: str, *, vocabulary: Container[str] = DEFAULT_VOCABULARY) -> RuleSet:
    """Parse YAML text with safe-load semantics and validate it.

    A mapping that repeats a key is rejected rather than silently keeping the
    last value.
    """
    try:
        raw = load_yaml_text(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML transformation config: {exc}") from exc
    return build_rule_set(raw, vocabulary=vocabulary)


def load_rule_set(path: Path, *, vocabulary: Container[str] = DEFAULT_VOCABULARY) -> RuleSet:
    """Load and validate a transformation config file."""
    path = path.resolve()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = load_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file at {path} is not valid UTF-8: {exc}") from exc

    if raw is not None and not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")
    return build_rule_set(raw, vocabulary=vocabulary)
