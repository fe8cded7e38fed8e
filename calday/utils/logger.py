"""Logging utilities for the calday package."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV_VAR = "CALDAY_LOG_LEVEL"

_LOGGER: Optional[logging.Logger] = None


def _configured_level() -> int:
    """Resolve the log level from ``CALDAY_LOG_LEVEL`` (defaults to INFO)."""

    name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str = "calday") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter."""
    global _LOGGER
    if _LOGGER is None:
        level = _configured_level()
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger("calday")
        _LOGGER.setLevel(level)
    return logging.getLogger(name)


__all__ = ["LOG_LEVEL_ENV_VAR", "get_logger"]
