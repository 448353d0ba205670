"""Domain package exports for the ticker state machine."""

from .events import EventKind, TickerState, TimerCommand, Transition, dispatch
from .ports import TickCallback, TimerPort
from .toggle import INITIAL_TOGGLE, ToggleState, advance

__all__ = [
    "EventKind",
    "INITIAL_TOGGLE",
    "TickCallback",
    "TickerState",
    "TimerCommand",
    "TimerPort",
    "ToggleState",
    "Transition",
    "advance",
    "dispatch",
]
