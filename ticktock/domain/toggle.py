"""Two-valued display toggle driven by timer ticks."""

from __future__ import annotations

from enum import Enum


class ToggleState(Enum):
    """Display mode shown in the info label."""

    TICK = "TICK"
    TOCK = "TOCK"

    def advance(self) -> "ToggleState":
        """Return the other value; no further states are reachable."""
        return ToggleState.TOCK if self is ToggleState.TICK else ToggleState.TICK

    def __str__(self) -> str:
        return self.name


INITIAL_TOGGLE = ToggleState.TICK


def advance(state: ToggleState) -> ToggleState:
    return state.advance()


__all__ = ["INITIAL_TOGGLE", "ToggleState", "advance"]
