"""Root exception type for assetflow."""

from __future__ import annotations


class AssetflowError(Exception):
    """Base class for all errors raised by assetflow."""
