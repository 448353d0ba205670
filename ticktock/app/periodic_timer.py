"""Periodic timer built on the Tk ``after`` scheduler.

The app passes Tk ``after`` and ``after_cancel`` callables into this class so
the pending token is tracked in one place and canceled safely when the user
pauses or the window closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..domain.ports import TickCallback

ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]


@dataclass
class TimerHandle:
    """Scheduler token for the next pending tick.

    Attributes:
        token: Token returned by the UI scheduler implementation.
        generation: Start counter value when the tick was scheduled. A
            firing callback whose generation does not match the pending
            handle is stale and gets dropped.
    """
    token: str
    generation: int


class PeriodicTimer:
    """Fire ``on_tick`` every ``interval_ms`` while active (Tk ``after`` loop)."""

    def __init__(
        self,
        schedule: ScheduleFn,
        cancel: CancelFn,
        interval_ms: int,
        on_tick: Optional[TickCallback] = None,
    ) -> None:
        """Store schedule/cancel functions and the fixed interval.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
            interval_ms: Delay between ticks, clamped to at least 1 ms.
            on_tick: Tick notification; may be attached later via
                :meth:`set_on_tick`.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._interval_ms = max(1, int(interval_ms))
        self._on_tick = on_tick
        self._handle: Optional[TimerHandle] = None
        self._active = False
        self._generation = 0

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def set_on_tick(self, callback: Optional[TickCallback]) -> None:
        self._on_tick = callback

    def is_active(self) -> bool:
        return self._active

    def start(self) -> None:
        """Activate the timer; no-op when already running."""
        if self._active:
            return
        self._active = True
        self._generation += 1
        self._arm()

    def stop(self) -> None:
        """Deactivate the timer and cancel the pending tick; no-op when idle."""
        if not self._active:
            return
        self._active = False
        handle = self._handle
        self._handle = None
        if handle is None:
            return
        try:
            self._cancel(handle.token)
        except Exception as exc:
            # Token may have fired already.
            self._log.debug("Cancel of timer token %s failed: %s", handle.token, exc)

    def handle(self) -> Optional[TimerHandle]:
        """Return the pending tick handle, if any."""
        return self._handle

    # ------------------------------------------------------------------
    def _arm(self) -> None:
        generation = self._generation
        token = self._schedule(self._interval_ms, lambda: self._fire(generation))
        self._handle = TimerHandle(token=token, generation=generation)

    def _fire(self, generation: int) -> None:
        pending = self._handle
        if pending is None or pending.generation != generation:
            return
        self._handle = None
        # Re-arm first so the callback may stop the timer.
        self._arm()
        if self._on_tick:
            self._on_tick()


__all__ = ["PeriodicTimer", "TimerHandle"]
