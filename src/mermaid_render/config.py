"""Environment-based configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings

from mermaid_render.constants import DEFAULT_MERMAID_SCRIPT

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and MERMAID_RENDER_* environment variables."""

    # Mermaid bundle: http(s) URL or a local file path
    mermaid_script: str = DEFAULT_MERMAID_SCRIPT

    # Browser
    browser_executable_path: Path | None = None
    headless: bool = True
    no_sandbox: bool = False
    navigation_timeout_ms: float = 30_000

    # Logging
    log_level: str = "INFO"

    @field_validator("navigation_timeout_ms")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(
                "navigation_timeout_ms must be positive"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def mermaid_script_is_local(self) -> bool:
        """True when mermaid_script names a file rather than a URL."""
        return not self.mermaid_script.startswith(
            ("http://", "https://", "file://")
        )

    @property
    def launch_args(self) -> list[str]:
        """Extra Chromium command-line switches."""
        return ["--no-sandbox"] if self.no_sandbox else []

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "MERMAID_RENDER_",
        "extra": "ignore",
    }
