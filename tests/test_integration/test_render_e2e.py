"""Integration: real Chromium + Mermaid render.

Needs a Playwright Chromium install and network access for the
Mermaid bundle (or MERMAID_RENDER_MERMAID_SCRIPT pointing at a local
copy). Opt in with MERMAID_RENDER_E2E=1.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from mermaid_render.config import Settings
from mermaid_render.errors import BrowserLaunchError, RenderError
from mermaid_render.pipeline import render_diagram
from tests.conftest import SAMPLE_DIAGRAM, make_request

pytestmark = pytest.mark.skipif(
    os.environ.get("MERMAID_RENDER_E2E") != "1",
    reason="set MERMAID_RENDER_E2E=1 to run browser tests",
)


@pytest.fixture
def settings() -> Settings:
    return Settings(no_sandbox=True)


async def _render(
    diagram: Path, out: Path, settings: Settings, **kwargs: object
) -> None:
    try:
        await render_diagram(
            make_request(diagram, out, **kwargs), settings
        )
    except BrowserLaunchError as exc:
        pytest.skip(f"Chromium unavailable: {exc}")


async def test_svg_has_both_nodes(
    diagram_file: Path, tmp_path: Path, settings: Settings
) -> None:
    out = tmp_path / "out.svg"
    await _render(diagram_file, out, settings)
    svg = out.read_text(encoding="utf-8")
    assert svg.startswith("<svg")
    assert ">A<" in svg
    assert ">B<" in svg


async def test_svg_render_is_repeatable(
    diagram_file: Path, tmp_path: Path, settings: Settings
) -> None:
    first = tmp_path / "first.svg"
    second = tmp_path / "second.svg"
    await _render(diagram_file, first, settings)
    await _render(diagram_file, second, settings)
    assert first.read_bytes() == second.read_bytes()


async def test_custom_css_is_inlined(
    diagram_file: Path, tmp_path: Path, settings: Settings
) -> None:
    css = tmp_path / "style.css"
    css.write_text(".node rect { fill: #ff0000 !important; }")
    out = tmp_path / "out.svg"
    await _render(diagram_file, out, settings, css_path=css)
    svg = out.read_text(encoding="utf-8")
    assert "#ff0000" in svg
    assert SAMPLE_DIAGRAM not in svg


async def test_transparent_png_clipped_to_diagram(
    diagram_file: Path, tmp_path: Path, settings: Settings
) -> None:
    out = tmp_path / "out.png"
    await _render(
        diagram_file, out, settings, background_color="transparent"
    )
    data = out.read_bytes()
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    width = int.from_bytes(data[16:20], "big")
    height = int.from_bytes(data[20:24], "big")
    assert 0 < width < 800
    assert 0 < height < 600
    # Colour type 6 = truecolour with alpha
    assert data[25] == 6


async def test_pdf_written(
    diagram_file: Path, tmp_path: Path, settings: Settings
) -> None:
    out = tmp_path / "out.pdf"
    await _render(diagram_file, out, settings)
    assert out.read_bytes().startswith(b"%PDF")


async def test_syntax_error_is_render_error(
    tmp_path: Path, settings: Settings
) -> None:
    diagram = tmp_path / "bad.mmd"
    diagram.write_text("graph TD; A--")
    with pytest.raises(RenderError):
        await _render(diagram, tmp_path / "out.svg", settings)
    assert not (tmp_path / "out.svg").exists()
