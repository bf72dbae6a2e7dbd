"""Logging setup for the server process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "info") -> None:
    """Configure root logging.

    Args:
        level: Level name (case-insensitive, e.g. ``"debug"``) or numeric level.
            Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = level

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("tasktracker").setLevel(resolved)
