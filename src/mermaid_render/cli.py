"""CLI entry point — ``mermaid-render -i diagram.mmd -o diagram.png``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import NoReturn

from pydantic import ValidationError

from mermaid_render import __version__
from mermaid_render.config import Settings
from mermaid_render.constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Theme,
)
from mermaid_render.errors import MermaidRenderError, UsageError
from mermaid_render.logging_config import setup_logging
from mermaid_render.pipeline import render_diagram
from mermaid_render.validation import validate_args

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Report argparse failures as UsageError (exit 1, not 2)."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        _fail(exc)

    if args.version:
        print(f"mermaid-render {__version__}")
        return

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid settings\n{exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        request = validate_args(args)
        asyncio.run(render_diagram(request, settings))
    except MermaidRenderError as exc:
        _fail(exc)


def _fail(exc: MermaidRenderError) -> NoReturn:
    logger.debug("event=cli_failed error=%s", type(exc).__name__)
    print(f"Error: {exc}", file=sys.stderr)
    sys.exit(exc.exit_code)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = _ArgumentParser(
        prog="mermaid-render",
        description=(
            "Render a Mermaid diagram file to SVG, PNG or PDF "
            "using headless Chromium."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "-t",
        "--theme",
        default=str(Theme.DEFAULT),
        help=(
            "Theme of the chart: "
            f"{', '.join(Theme)} (default: default)"
        ),
    )
    parser.add_argument(
        "-w",
        "--width",
        default=str(DEFAULT_WIDTH),
        help=f"Width of the page (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-H",
        "--height",
        default=str(DEFAULT_HEIGHT),
        help=f"Height of the page (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Input Mermaid file. Required.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=(
            "Output file ending in .svg, .png or .pdf "
            '(default: input + ".svg")'
        ),
    )
    parser.add_argument(
        "-b",
        "--backgroundColor",
        default=DEFAULT_BACKGROUND,
        help=(
            "Background color, e.g. transparent, red, '#F0F0F0' "
            f"(default: {DEFAULT_BACKGROUND})"
        ),
    )
    parser.add_argument(
        "-c",
        "--configFile",
        default=None,
        help="JSON configuration file for Mermaid",
    )
    parser.add_argument(
        "-C",
        "--cssFile",
        default=None,
        help="CSS file appended after Mermaid's own styles",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


if __name__ == "__main__":
    main()
