from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

DEFAULT_INTERVAL_MS = 500
DEFAULT_TITLE = "TickTock – Timer Demo"

_INT_FIELDS = ("interval_ms", "width", "height", "font_size")
_BOOL_FIELDS = ("autostart", "debug_logging")
_STR_FIELDS = ("title", "initial_label", "initial_button")


@dataclass(frozen=True)
class TickerConfig:
    """Typed runtime settings for the ticker window (in-memory only).

    Values are coerced on construction; invalid numbers raise ``ValueError``
    naming the offending field.
    """

    interval_ms: int = DEFAULT_INTERVAL_MS
    autostart: bool = True
    title: str = DEFAULT_TITLE
    width: int = 250
    height: int = 175
    initial_label: str = "INFO"
    initial_button: str = "PAUSE / RESUME"
    font_size: int = 24
    debug_logging: bool = False

    def __post_init__(self) -> None:
        for name in _INT_FIELDS:
            object.__setattr__(self, name, _coerce_positive_int(name, getattr(self, name)))
        for name in _BOOL_FIELDS:
            object.__setattr__(self, name, _coerce_bool(getattr(self, name)))
        for name in _STR_FIELDS:
            object.__setattr__(self, name, _coerce_optional_str(getattr(self, name)))


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------
def _coerce_optional_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _coerce_positive_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, int):
        coerced = value
    elif isinstance(value, float):
        if not (math.isfinite(value) and value.is_integer()):
            raise ValueError(f"{name} must be an integer.")
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced <= 0:
        raise ValueError(f"{name} must be positive.")
    return coerced


__all__ = ["DEFAULT_INTERVAL_MS", "DEFAULT_TITLE", "TickerConfig"]
