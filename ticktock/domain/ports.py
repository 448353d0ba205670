from __future__ import annotations

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


# ---- Ports (Hexagonal boundaries) ----
class TimerPort(Protocol):
    """Periodic timer owned by the UI toolkit.

    ``start``/``stop`` are idempotent. ``on_tick`` is the notification
    channel; it fires once per interval while the timer is active.
    """

    def start(self) -> None: ...
    def stop(self) -> None: ...
    def is_active(self) -> bool: ...
    def set_on_tick(self, callback: Optional[TickCallback]) -> None: ...


__all__ = ["TickCallback", "TimerPort"]
