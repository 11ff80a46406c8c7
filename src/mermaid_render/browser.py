"""Browser session manager: one Chromium instance, one page.

The session is an async context manager: the browser is closed on
every exit path, including failures while rendering or writing.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from playwright.async_api import (
    Browser,
    Page,
    Playwright,
    async_playwright,
)
from playwright.async_api import Error as PlaywrightError

from mermaid_render.config import Settings
from mermaid_render.constants import HOST_DOCUMENT
from mermaid_render.errors import BrowserLaunchError, RenderError

logger = logging.getLogger(__name__)

HOST_DOCUMENT_PATH = Path(__file__).with_name(HOST_DOCUMENT)


async def _launch(pw: Playwright, settings: Settings) -> Browser:
    executable = (
        str(settings.browser_executable_path)
        if settings.browser_executable_path
        else None
    )
    try:
        return await pw.chromium.launch(
            headless=settings.headless,
            executable_path=executable,
            args=settings.launch_args,
        )
    except PlaywrightError as exc:
        raise BrowserLaunchError(
            f"Could not launch Chromium: {exc.message}"
        ) from exc


async def open_host_page(
    browser: Browser,
    width: int,
    height: int,
    settings: Settings,
) -> Page:
    """Open the single page, size it, and load the host document."""
    page = await browser.new_page()
    page.set_default_navigation_timeout(
        settings.navigation_timeout_ms
    )
    # Viewport must be set before navigation
    await page.set_viewport_size({"width": width, "height": height})
    try:
        await page.goto(HOST_DOCUMENT_PATH.as_uri())
        if settings.mermaid_script_is_local:
            await page.add_script_tag(path=settings.mermaid_script)
        else:
            await page.add_script_tag(url=settings.mermaid_script)
    except PlaywrightError as exc:
        raise RenderError.from_page_error(
            "Loading host document", exc
        ) from exc
    logger.debug(
        "event=host_page_ready width=%d height=%d script=%s",
        width,
        height,
        settings.mermaid_script,
    )
    return page


@asynccontextmanager
async def browser_session(
    width: int,
    height: int,
    settings: Settings,
) -> AsyncIterator[Page]:
    """Yield a ready page; always close the browser afterwards."""
    async with async_playwright() as pw:
        browser = await _launch(pw, settings)
        logger.debug("event=browser_launched")
        try:
            yield await open_host_page(
                browser, width, height, settings
            )
        finally:
            await browser.close()
            logger.debug("event=browser_closed")
