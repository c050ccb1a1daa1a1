"""Logging setup for yabber.

Library modules (paths, regulation, profiles, backup) only log; they never
touch handlers. The `yabber` CLI configures the root logger once per run
from `--log-level` or `YABBER_LOG_LEVEL`. Unsafe entries skipped during
un-rooting and malformed descriptors are reported at WARNING, so the
default level keeps them visible.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOGGER_NAMESPACE = "yabber"
DEFAULT_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_level(level: str | int | None) -> int:
    """Turn a level name, number or None into a logging level (INFO if unknown)."""
    if level is None:
        level = os.environ.get("YABBER_LOG_LEVEL") or DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else DEFAULT_LEVEL


def configure_logging(level: str | int | None = None, *, force: bool = False) -> None:
    """Configure the root logger for a yabber run."""
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=force,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the `yabber` namespace."""
    if not name:
        return logging.getLogger(LOGGER_NAMESPACE)
    if name != LOGGER_NAMESPACE and not name.startswith(LOGGER_NAMESPACE + "."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level"]
