"""Configuration-related exceptions."""

from __future__ import annotations

from assetflow.exceptions.base import AssetflowError


class ConfigError(AssetflowError, ValueError):
    """Raised when a transformation config is invalid."""
