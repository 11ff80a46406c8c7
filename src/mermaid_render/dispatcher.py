"""Output format dispatcher: extract the render as svg, png or pdf."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import FloatRect, Page

from mermaid_render.constants import (
    CONTAINER_SELECTOR,
    SVG_SELECTOR,
    OutputFormat,
)
from mermaid_render.errors import FileSystemError, RenderError
from mermaid_render.models import RenderedArtifact, RenderRequest

logger = logging.getLogger(__name__)

_BOUNDING_BOX_SCRIPT = """
svg => {
  const rect = svg.getBoundingClientRect();
  return { x: rect.left, y: rect.top, width: rect.width, height: rect.height };
}
"""


async def write_svg(page: Page, request: RenderRequest) -> None:
    """Write the container's inner markup verbatim."""
    markup = await page.eval_on_selector(
        CONTAINER_SELECTOR, "container => container.innerHTML"
    )
    request.output_path.write_text(markup, encoding="utf-8")


async def svg_clip(page: Page) -> FloatRect:
    """Bounding box of the rendered <svg> in page coordinates."""
    return await page.eval_on_selector(
        SVG_SELECTOR, _BOUNDING_BOX_SCRIPT
    )


async def write_png(page: Page, request: RenderRequest) -> None:
    """Screenshot exactly the diagram's bounding box."""
    clip = await svg_clip(page)
    await page.screenshot(
        path=request.output_path,
        clip=clip,
        omit_background=request.transparent,
    )


async def write_pdf(page: Page, request: RenderRequest) -> None:
    """Full-page paginated capture."""
    await page.pdf(
        path=request.output_path,
        print_background=not request.transparent,
    )


_WRITERS: dict[
    OutputFormat,
    Callable[[Page, RenderRequest], Awaitable[None]],
] = {
    OutputFormat.SVG: write_svg,
    OutputFormat.PNG: write_png,
    OutputFormat.PDF: write_pdf,
}


async def write_output(
    page: Page, request: RenderRequest
) -> RenderedArtifact:
    """Run exactly one writer, chosen by the output extension.

    A partially written file is left in place on failure.
    """
    fmt = request.output_format
    writer = _WRITERS[fmt]
    try:
        await writer(page, request)
    except PlaywrightError as exc:
        raise RenderError.from_page_error(
            f"Writing {fmt}", exc
        ) from exc
    except OSError as exc:
        raise FileSystemError(
            f'Cannot write output file "{request.output_path}": '
            f"{exc.strerror or exc}"
        ) from exc

    artifact = RenderedArtifact(
        path=request.output_path,
        output_format=fmt,
        size_bytes=request.output_path.stat().st_size,
    )
    logger.info(
        "event=output_written format=%s path=%s bytes=%d",
        fmt,
        artifact.path,
        artifact.size_bytes,
    )
    return artifact
