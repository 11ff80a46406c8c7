"""Input loader: read the diagram, optional JSON config and CSS."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from mermaid_render.errors import (
    ConfigParseError,
    FileSystemError,
    UsageError,
)
from mermaid_render.models import DiagramInputs, RenderRequest

logger = logging.getLogger(__name__)

_CONFIG_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(
    dict[str, Any]
)


def _read_text(path: Path, kind: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise FileSystemError(
            f'{kind} file "{path}" doesn\'t exist'
        ) from None
    except UnicodeDecodeError as exc:
        raise UsageError(
            f'{kind} file "{path}" is not valid UTF-8 '
            f"(byte {exc.start})"
        ) from exc
    except OSError as exc:
        raise FileSystemError(
            f'Cannot read {kind.lower()} file "{path}": '
            f"{exc.strerror or exc}"
        ) from exc


def parse_chart_config(raw: str, source: Path) -> dict[str, Any]:
    """Parse Mermaid config JSON.

    Always returns a dict or raises ConfigParseError; there is no
    "parsed nothing" result for callers to forget about.
    """
    try:
        return _CONFIG_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise ConfigParseError(
            f'Configuration file "{source}" is not a valid JSON '
            f"object: {first['msg']}"
        ) from exc


def load_inputs(request: RenderRequest) -> DiagramInputs:
    """Read every file the render needs. No other side effects."""
    definition = _read_text(request.input_path, "Input")

    chart_config = None
    if request.config_path is not None:
        chart_config = parse_chart_config(
            _read_text(request.config_path, "Configuration"),
            request.config_path,
        )

    custom_css = None
    if request.css_path is not None:
        custom_css = _read_text(request.css_path, "CSS")

    logger.debug(
        "event=inputs_loaded definition_chars=%d config=%s css=%s",
        len(definition),
        chart_config is not None,
        custom_css is not None,
    )
    return DiagramInputs(
        definition=definition,
        chart_config=chart_config,
        custom_css=custom_css,
    )
