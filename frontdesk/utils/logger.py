"""Process-wide logging setup for the room-change advisor."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from frontdesk.utils.config import get_settings


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_configured_level: Optional[int] = None


def resolve_level(level: str) -> int:
    """Translate a level name such as ``"info"``; unknown names raise ``ValueError``."""
    name = level.strip().upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        raise ValueError(f"LOG_LEVEL must be one of {sorted(levels)}, got {level!r}")
    return levels[name]


def configure_logging(level: Optional[str] = None) -> int:
    """Install the stdout handler on first use and return the active level.

    Later calls only adjust the level when one is passed explicitly.
    """
    global _configured_level
    if _configured_level is not None and level is None:
        return _configured_level

    resolved = resolve_level(level or get_settings().log_level)
    if _configured_level is None:
        logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stdout)
    else:
        logging.getLogger().setLevel(resolved)
    _configured_level = resolved
    return resolved


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
