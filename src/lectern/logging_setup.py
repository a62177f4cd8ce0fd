"""Logging for Lectern runs: one Rich handler on the root logger, writing to stderr."""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console"]

LOG_LEVEL_ENV = "LECTERN_LOG_LEVEL"

console = Console(stderr=True)


class _LecternHandler(RichHandler):
    """Marker subclass so repeated configuration reuses the installed handler."""


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def configure_logging(level: str | int | None = None) -> None:
    """Install the Rich handler and set the root level.

    ``level`` wins over ``LECTERN_LOG_LEVEL``; unknown names fall back to INFO.
    Calling this again only changes the level.
    """
    root = logging.getLogger()
    if not any(isinstance(handler, _LecternHandler) for handler in root.handlers):
        root.handlers.clear()
        handler = _LecternHandler(console=console, rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    root.setLevel(_resolve_level(level))
    logging.captureWarnings(True)
