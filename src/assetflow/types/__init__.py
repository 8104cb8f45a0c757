"""Shared types for assetflow."""

from .common import EntityType, JsonObject, JsonScalar, JsonValue
from .transform import Options, RawRule, Rule

__all__ = [
    "EntityType",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Options",
    "RawRule",
    "Rule",
]
