"""Singleton logging configuration.

setup_logging() configures the root logger once per process and
clamps noisy third-party loggers. A second call only adjusts the
root level, so ``--verbose`` can still take effect after an early
default call.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Third-party loggers to suppress to WARNING
_SUPPRESSED_LOGGERS = (
    "asyncio",
    "playwright",
)

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger. Idempotent apart from the level."""
    global _configured  # noqa: PLW0603
    numeric = getattr(logging, level.upper())
    if _configured:
        logging.getLogger().setLevel(numeric)
        return
    _configured = True

    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    for name in _SUPPRESSED_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(logging.WARNING)
