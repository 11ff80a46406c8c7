"""Error taxonomy for the render pipeline.

Every error is terminal: nothing is retried. The CLI catches
``MermaidRenderError`` and exits with status 1, so each subclass
only needs a message a user can act on.
"""

from __future__ import annotations

from mermaid_render.constants import ERROR_TRUNCATION_CHARS


class MermaidRenderError(Exception):
    """Base class for all expected failures."""

    exit_code = 1


class UsageError(MermaidRenderError):
    """Missing or invalid command-line flag."""


class FileSystemError(MermaidRenderError):
    """Input, config, CSS file or output directory is missing."""


class ConfigParseError(MermaidRenderError):
    """Config file content is not a JSON object."""


class BrowserLaunchError(MermaidRenderError):
    """Chromium could not be started."""


class RenderError(MermaidRenderError):
    """Failure inside the browser execution context."""

    @classmethod
    def from_page_error(
        cls, stage: str, error: Exception
    ) -> RenderError:
        """Wrap an in-page failure, keeping the first line short."""
        detail = str(error).strip()[:ERROR_TRUNCATION_CHARS]
        return cls(f"{stage} failed: {detail}")
