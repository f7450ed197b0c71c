"""
Logging setup - Root logger configuration for the application.

Modules log through logging.getLogger(__name__); this module only
decides level and format, once, at startup.
"""

import logging


def configure_logging(level: str = "INFO", fmt: str | None = None) -> None:
    """
    Configure the root logger.

    Sets the root level and installs a stream handler unless one is
    already present (e.g. when running under uvicorn or pytest).

    Args:
        level: Level name (case-insensitive); unknown names fall back to INFO
        fmt: logging format string, or None for the logging default
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    root.setLevel(resolved)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt or logging.BASIC_FORMAT))
        root.addHandler(handler)

    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(resolved))
