"""Mini README: Application-wide logging helpers for Skysweep.

Structure:
    * get_logger - factory returning module loggers with baseline setup.
    * configure_root_logger - one-shot handler installation plus level control.

Usage:
    Planner, validator and interface modules call ``get_logger(__name__)``
    at import time. The root handler is installed once per process so
    re-importing modules in tests or under uvicorn reload does not stack
    duplicate handlers. Entry points call ``configure_root_logger`` with the
    configured level to adjust verbosity afterwards.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the Skysweep formatter once and optionally set the root level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()

    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.setLevel(logging.INFO)
        root_logger.addHandler(handler)
        _LOGGER_INITIALISED = True

    if level is not None:
        root_logger.setLevel(level.upper() if isinstance(level, str) else level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
