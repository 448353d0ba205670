"""Tagged UI events and the pure transition function of the ticker.

Call context:
    ``TickerVM.handle`` feeds every button press and timer tick through
    :func:`dispatch`. The function never touches the timer or the view; it
    only returns what the view-model should do next.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from .toggle import INITIAL_TOGGLE, ToggleState


class EventKind(Enum):
    """External triggers understood by the ticker."""

    BUTTON_PRESSED = "button_pressed"
    TIMER_TICK = "timer_tick"


class TimerCommand(Enum):
    """Instruction for the timer port produced by :func:`dispatch`."""

    NONE = "none"
    START = "start"
    STOP = "stop"


@dataclass(frozen=True)
class TickerState:
    """Toggle value plus a snapshot of the timer's active flag.

    Attributes:
        toggle: Current display mode.
        timer_active: Whether the periodic timer was running when the
            snapshot was taken. The timer itself owns the real flag.
    """

    toggle: ToggleState = INITIAL_TOGGLE
    timer_active: bool = False


@dataclass(frozen=True)
class Transition:
    """Result of dispatching one event.

    Attributes:
        state: State after the event. ``timer_active`` already reflects the
            command, so callers can render without re-querying the timer.
        timer_command: What to do with the timer.
        render: ``False`` when the event was ignored and nothing needs a refresh.
    """

    state: TickerState
    timer_command: TimerCommand = TimerCommand.NONE
    render: bool = False


def dispatch(state: TickerState, event: Any) -> Transition:
    """Map ``(state, event)`` to the next state and view/timer instructions."""
    if event is EventKind.BUTTON_PRESSED:
        if state.timer_active:
            return Transition(
                state=replace(state, timer_active=False),
                timer_command=TimerCommand.STOP,
                render=True,
            )
        return Transition(
            state=replace(state, timer_active=True),
            timer_command=TimerCommand.START,
            render=True,
        )

    if event is EventKind.TIMER_TICK:
        return Transition(
            state=replace(state, toggle=state.toggle.advance()),
            render=True,
        )

    return Transition(state=state)


__all__ = ["EventKind", "TickerState", "TimerCommand", "Transition", "dispatch"]
