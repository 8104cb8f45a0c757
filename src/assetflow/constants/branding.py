"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ASSETFLOW"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ ASSETFLOW",
    "     // transformation rules for asset discovery",
)
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} transformation config checker"))
VALID_CONFIG_MESSAGE: str = "Configuration is valid."
