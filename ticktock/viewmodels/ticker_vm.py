from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Optional

from ..domain.events import EventKind, TickerState, TimerCommand, dispatch
from ..domain.ports import TimerPort
from ..domain.toggle import INITIAL_TOGGLE
from .display_format import ViewText, render_view
from .settings_vm import TickerConfig

RenderFn = Callable[[ViewText], None]


class TickerVM:
    """Owns the toggle state and drives the timer port from UI events.

    Call chain:
        ``PeriodicTimer`` calls :meth:`tick` once per interval and the
        window's button calls :meth:`press_button`. Both go through
        :meth:`handle`, which runs the pure ``dispatch`` step, applies the
        resulting timer command and pushes fresh :class:`ViewText` to
        ``on_render``.
    """

    def __init__(
        self,
        timer: TimerPort,
        *,
        config: Optional[TickerConfig] = None,
        on_render: Optional[RenderFn] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.timer = timer
        self.config = config or TickerConfig()
        self.on_render = on_render
        self.state = TickerState(toggle=INITIAL_TOGGLE, timer_active=timer.is_active())
        timer.set_on_tick(self.tick)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start(self) -> ViewText:
        """Startup sequence: optionally start the timer, then show state."""
        if self.config.autostart:
            self.timer.start()
            self._log.info("Timer started (interval %d ms)", self.config.interval_ms)
        return self.refresh()

    def press_button(self) -> Optional[ViewText]:
        return self.handle(EventKind.BUTTON_PRESSED)

    def tick(self) -> Optional[ViewText]:
        return self.handle(EventKind.TIMER_TICK)

    def handle(self, event: Any) -> Optional[ViewText]:
        """Dispatch one event; return the rendered text or ``None`` if ignored."""
        snapshot = replace(self.state, timer_active=self.timer.is_active())
        transition = dispatch(snapshot, event)
        if not transition.render:
            return None

        if event is EventKind.TIMER_TICK:
            self._log.debug("Timer went off -> %s", transition.state.toggle)
        self._apply_timer_command(transition.timer_command)

        self.state = replace(transition.state, timer_active=self.timer.is_active())
        return self._push(render_view(self.state))

    def refresh(self) -> ViewText:
        """Re-render from current state without changing it."""
        self.state = replace(self.state, timer_active=self.timer.is_active())
        return self._push(render_view(self.state))

    def shutdown(self) -> None:
        """Stop the timer so no tick fires after the window is gone."""
        self.timer.stop()

    # ------------------------------------------------------------------
    @property
    def view_text(self) -> ViewText:
        return render_view(self.state)

    def _apply_timer_command(self, command: TimerCommand) -> None:
        if command is TimerCommand.START:
            self.timer.start()
            self._log.info("Timer resumed")
        elif command is TimerCommand.STOP:
            self.timer.stop()
            self._log.info("Timer paused")

    def _push(self, view: ViewText) -> ViewText:
        if self.on_render:
            self.on_render(view)
        return view


__all__ = ["RenderFn", "TickerVM"]
