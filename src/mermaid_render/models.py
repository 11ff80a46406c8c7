"""Transient value objects passed between pipeline stages."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mermaid_render.constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    TRANSPARENT,
    OutputFormat,
    Theme,
)
from mermaid_render.errors import UsageError


def output_format_for(path: Path) -> OutputFormat:
    """Derive the output format from a path's trailing extension."""
    for fmt in OutputFormat:
        if path.name.endswith(f".{fmt}"):
            return fmt
    raise UsageError(
        'Output file must end with ".svg", ".png" or ".pdf"'
    )


def is_transparent(background_color: str) -> bool:
    return background_color == TRANSPARENT


@dataclass(frozen=True)
class RenderRequest:
    """One validated render invocation."""

    input_path: Path
    output_path: Path
    theme: Theme = Theme.DEFAULT
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background_color: str = DEFAULT_BACKGROUND
    config_path: Path | None = None
    css_path: Path | None = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, int)
                or value <= 0
            ):
                raise UsageError(
                    f"{name} must be a positive integer, got {value!r}"
                )
        # Fail fast on an unsupported extension
        output_format_for(self.output_path)

    @property
    def output_format(self) -> OutputFormat:
        return output_format_for(self.output_path)

    @property
    def transparent(self) -> bool:
        return is_transparent(self.background_color)


@dataclass(frozen=True)
class DiagramInputs:
    """File contents read by the input loader."""

    definition: str
    chart_config: dict[str, Any] | None = None
    custom_css: str | None = None


@dataclass(frozen=True)
class RenderedArtifact:
    """The file produced by the output dispatcher."""

    path: Path
    output_format: OutputFormat
    size_bytes: int
