"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys
from typing import Any

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error")


def configure_logging(level: str = "INFO", fmt: str = LOG_FORMAT) -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
        fmt: Format string for the root handler.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy server loggers
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def kv(**fields: Any) -> str:
    """Render key/value pairs as ``key=value`` separated by spaces.

    Values containing whitespace are quoted with ``repr``.
    """
    parts = []
    for key, value in fields.items():
        text = str(value)
        if not text or any(char.isspace() for char in text):
            text = repr(text)
        parts.append(f"{key}={text}")
    return " ".join(parts)
