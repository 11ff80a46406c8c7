"""Shared constants — single source of truth for cross-module values.

StrEnum members are str-compatible, so argparse choices and in-page
JavaScript arguments work unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class Theme(StrEnum):
    """Built-in Mermaid themes."""

    DEFAULT = "default"
    FOREST = "forest"
    DARK = "dark"
    NEUTRAL = "neutral"


class OutputFormat(StrEnum):
    """Rendered artifact formats, keyed by file extension."""

    SVG = "svg"
    PNG = "png"
    PDF = "pdf"


# ── Defaults ─────────────────────────────────────────────

DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600
DEFAULT_BACKGROUND = "white"
TRANSPARENT = "transparent"

# Extensions accepted for the optional side files
CONFIG_SUFFIX = ".json"
CSS_SUFFIX = ".css"

# ── Host document ────────────────────────────────────────

HOST_DOCUMENT = "index.html"
CONTAINER_SELECTOR = "#container"
SVG_SELECTOR = "#container svg"

DEFAULT_MERMAID_SCRIPT = (
    "https://cdn.jsdelivr.net/npm/mermaid@11/dist/mermaid.min.js"
)

# Truncation limit for in-page error messages
ERROR_TRUNCATION_CHARS = 500
