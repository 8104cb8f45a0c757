"""Shared exception hierarchy for assetflow."""

from __future__ import annotations

from .base import AssetflowError
from .config import ConfigError
from .transform import (
    ConflictingNoneTransformationError,
    InvalidKeyFormatError,
    InvalidRuleFieldError,
    NoMatchError,
    NonCompliantTypeError,
)

__all__ = [
    "AssetflowError",
    "ConfigError",
    "ConflictingNoneTransformationError",
    "InvalidKeyFormatError",
    "InvalidRuleFieldError",
    "NoMatchError",
    "NonCompliantTypeError",
]
