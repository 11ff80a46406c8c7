"""Render pipeline: load inputs, render in Chromium, write the output."""

from __future__ import annotations

import logging
import time

from mermaid_render.browser import browser_session
from mermaid_render.config import Settings
from mermaid_render.dispatcher import write_output
from mermaid_render.injector import inject_diagram
from mermaid_render.loader import load_inputs
from mermaid_render.models import RenderedArtifact, RenderRequest

logger = logging.getLogger(__name__)


async def render_diagram(
    request: RenderRequest,
    settings: Settings | None = None,
) -> RenderedArtifact:
    """Render one diagram file to ``request.output_path``.

    Stages run strictly in order. Inputs are read before the browser
    starts, so a bad config file never allocates a browser.
    """
    settings = settings or Settings()
    start = time.monotonic()
    logger.info(
        "event=render_start input=%s output=%s format=%s",
        request.input_path,
        request.output_path,
        request.output_format,
    )

    inputs = load_inputs(request)

    async with browser_session(
        request.width, request.height, settings
    ) as page:
        await inject_diagram(page, request, inputs)
        artifact = await write_output(page, request)

    logger.info(
        "event=render_done duration_ms=%.0f",
        (time.monotonic() - start) * 1000,
    )
    return artifact
