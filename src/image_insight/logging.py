"""Logging utilities with emoji level prefixes.

Usage:
    from .logging import get_logger
    logger = get_logger(__name__)

Results meant for the user are printed to stdout; everything routed through
these loggers goes to stderr so the two never interleave in redirected output.
"""
from __future__ import annotations

import logging
import sys
from typing import Dict

_LEVEL_EMOJI: Dict[int, str] = {
    logging.DEBUG: "🔍",
    logging.INFO: "🟢",
    logging.WARNING: "⚠️",
    logging.ERROR: "❌",
    logging.CRITICAL: "🔥",
}

PACKAGE_LOGGER = "image_insight"


class _EmojiFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - simple override
        emoji = _LEVEL_EMOJI.get(record.levelno, "▫️")
        record.msg = f"{emoji} {record.msg}"
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-level logger with emoji formatting applied once.

    Idempotent: calling multiple times won't duplicate handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        fmt = _EmojiFormatter("%(asctime)s | %(name)s | %(levelname)s | %(message)s", "%H:%M:%S")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def set_level(level: int) -> None:
    """Apply ``level`` to every logger created under the package namespace."""
    for name, logger in logging.root.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(PACKAGE_LOGGER):
            logger.setLevel(level)
