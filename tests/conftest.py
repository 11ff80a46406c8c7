"""Shared test fixtures — diagram files, parsed args, fake Playwright page."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from mermaid_render.constants import DEFAULT_BACKGROUND
from mermaid_render.models import RenderRequest

SAMPLE_DIAGRAM = "graph TD; A-->B"
SAMPLE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" id="mermaid-0">'
    "<g><text>A</text><text>B</text></g></svg>"
)


@pytest.fixture
def diagram_file(tmp_path: Path) -> Path:
    path = tmp_path / "diagram.mmd"
    path.write_text(SAMPLE_DIAGRAM, encoding="utf-8")
    return path


def make_args(**overrides: Any) -> argparse.Namespace:
    """Namespace shaped like the CLI parser's defaults."""
    values: dict[str, Any] = {
        "version": False,
        "theme": "default",
        "width": "800",
        "height": "600",
        "input": None,
        "output": None,
        "backgroundColor": DEFAULT_BACKGROUND,
        "configFile": None,
        "cssFile": None,
        "verbose": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def make_request(
    diagram: Path, output: Path, **overrides: Any
) -> RenderRequest:
    return RenderRequest(
        input_path=diagram, output_path=output, **overrides
    )


def _write_to_path(**kwargs: Any) -> None:
    Path(kwargs["path"]).write_bytes(b"rendered")


@pytest.fixture
def fake_page() -> MagicMock:
    """Stand-in for playwright.async_api.Page.

    screenshot() and pdf() write a small file so callers can stat it.
    """
    page = MagicMock()
    page.goto = AsyncMock()
    page.add_script_tag = AsyncMock()
    page.set_viewport_size = AsyncMock()
    page.evaluate = AsyncMock(return_value=None)
    page.eval_on_selector = AsyncMock(return_value=SAMPLE_SVG)
    page.screenshot = AsyncMock(side_effect=_write_to_path)
    page.pdf = AsyncMock(side_effect=_write_to_path)
    return page


@pytest.fixture
def fake_playwright(fake_page: MagicMock) -> MagicMock:
    """async_playwright() replacement whose browser yields fake_page."""
    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=fake_page)
    browser.close = AsyncMock()

    pw = MagicMock()
    pw.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__.return_value = pw
    manager.__aexit__.return_value = False

    factory = MagicMock(return_value=manager)
    factory.pw = pw
    factory.browser = browser
    return factory
