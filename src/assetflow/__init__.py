"""Transformation-rule configuration engine for asset-discovery pipelines."""

from __future__ import annotations

__version__ = "0.3.0"
