"""Build logging: one stream handler on the root logger, level from the environment."""

from __future__ import annotations

import logging
import os
from typing import Final

LOG_LEVEL_ENV: Final[str] = "CANVASCOMPONENTS_LOG_LEVEL"

_HANDLER_ATTACHED: bool = False
_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_PACKAGE_LOGGER: Final[str] = "canvascomponents"


def _resolve_level(override: str | None = None) -> int:
    level_name = (override or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def _attach_handler(level: int) -> None:
    global _HANDLER_ATTACHED

    root = logging.getLogger()
    if not _HANDLER_ATTACHED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        _HANDLER_ATTACHED = True
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger configured with a single stream handler."""
    level = _resolve_level()
    _attach_handler(level)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger


def set_level(level_name: str) -> None:
    """Re-level the root logger and every already-created package logger.

    Used by the CLI's --verbose flag, which runs after module loggers exist.
    """
    level = _resolve_level(level_name)
    _attach_handler(level)
    for name, existing in logging.Logger.manager.loggerDict.items():
        if name.startswith(_PACKAGE_LOGGER) and isinstance(existing, logging.Logger):
            existing.setLevel(level)
