"""Root logger setup for the ticker app.

``App`` calls :func:`configure_root` once with the config's ``debug_logging``
flag. Two environment variables can override verbosity (never behaviour):

  - ``TICKTOCK_LOG_LEVEL``: level name (``debug``) or number (``10``)
  - ``TICKTOCK_DEBUG``: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "TICKTOCK_LOG_LEVEL"
DEBUG_ENV_VAR = "TICKTOCK_DEBUG"


def _parse_level(text: str) -> Optional[int]:
    text = text.strip()
    if text.isdecimal():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else None


def env_level() -> Optional[int]:
    """Return the level forced by the environment, or ``None``.

    An unparseable ``TICKTOCK_LOG_LEVEL`` falls back to INFO so a typo still
    counts as an explicit override.
    """
    raw = os.getenv(LEVEL_ENV_VAR)
    if raw and raw.strip():
        level = _parse_level(raw)
        return logging.INFO if level is None else level
    flag = (os.getenv(DEBUG_ENV_VAR) or "").strip().lower()
    if flag in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def resolve_level(debug_enabled: bool) -> int:
    forced = env_level()
    if forced is not None:
        return forced
    return logging.DEBUG if debug_enabled else logging.INFO


def configure_root(debug_enabled: bool = False) -> int:
    """Install the compact format once and set the effective root level."""
    level = resolve_level(debug_enabled)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)


__all__ = ["configure_root", "env_level", "level_name", "resolve_level"]
