"""Argument validation: turn parsed CLI flags into a RenderRequest.

Runs before any browser resource is allocated. Checks happen in a
fixed order and the first failure wins.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from mermaid_render.constants import (
    CONFIG_SUFFIX,
    CSS_SUFFIX,
    DEFAULT_BACKGROUND,
    Theme,
)
from mermaid_render.errors import FileSystemError, UsageError
from mermaid_render.models import RenderRequest, output_format_for


def parse_dimension(name: str, raw: str | int) -> int:
    """Parse a positive integer page dimension."""
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()) or int(text) <= 0:
        raise UsageError(
            f"{name} must be a positive integer, got {raw!r}"
        )
    return int(text)


def parse_theme(raw: str) -> Theme:
    try:
        return Theme(raw)
    except ValueError:
        valid = ", ".join(Theme)
        raise UsageError(
            f"Unknown theme {raw!r}. Use: {valid}"
        ) from None


def _check_side_file(
    raw: str | None, kind: str, suffix: str
) -> Path | None:
    if not raw:
        return None
    path = Path(raw)
    if not path.exists():
        raise FileSystemError(f'{kind} file "{raw}" doesn\'t exist')
    if not path.name.endswith(suffix):
        raise UsageError(f'{kind} file must end with "{suffix}"')
    return path


def validate_args(args: argparse.Namespace) -> RenderRequest:
    """Validate flags and build the request, or raise."""
    if not args.input:
        raise UsageError("Please specify input file: -i <input>")
    input_path = Path(args.input)
    if not input_path.exists():
        raise FileSystemError(
            f'Input file "{args.input}" doesn\'t exist'
        )

    output_path = Path(args.output or f"{args.input}.svg")
    output_format_for(output_path)
    output_dir = output_path.parent
    if not output_dir.exists():
        raise FileSystemError(
            f'Output directory "{output_dir}/" doesn\'t exist'
        )

    config_path = _check_side_file(
        args.configFile, "Configuration", CONFIG_SUFFIX
    )
    css_path = _check_side_file(args.cssFile, "CSS", CSS_SUFFIX)

    return RenderRequest(
        input_path=input_path,
        output_path=output_path,
        theme=parse_theme(args.theme),
        width=parse_dimension("width", args.width),
        height=parse_dimension("height", args.height),
        background_color=args.backgroundColor or DEFAULT_BACKGROUND,
        config_path=config_path,
        css_path=css_path,
    )
