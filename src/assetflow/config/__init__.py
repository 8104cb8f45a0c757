"""Transformation config parsing, validation and matching.

This package facade re-exports the public names so callers can use
``from assetflow.config import ...``.
"""

from __future__ import annotations

from assetflow.config.fingerprint import rule_set_fingerprint
from assetflow.config.keys import split_key
from assetflow.config.loader import build_rule_set, load_rule_set, load_rule_set_text
from assetflow.config.matcher import check_transformations
from assetflow.config.model import MatchSet, RuleSet
from assetflow.config.normalizer import validate_rules
from assetflow.config.parser import parse_document
from assetflow.config.validator import validate_config_document, validate_config_file

__all__ = [
    "MatchSet",
    "RuleSet",
    "build_rule_set",
    "check_transformations",
    "load_rule_set",
    "load_rule_set_text",
    "parse_document",
    "rule_set_fingerprint",
    "split_key",
    "validate_config_document",
    "validate_config_file",
    "validate_rules",
]
