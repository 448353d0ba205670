"""Display-text helpers for the ticker view.

Call context:
    ``TickerVM`` calls :func:`render_view` after every handled event; the
    result is pushed to the window through the view-model's render callback.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.events import TickerState
from ..domain.toggle import ToggleState

PAUSE_LABEL = "Pause"
RESUME_LABEL = "Resume"


@dataclass(frozen=True)
class ViewText:
    """Strings shown by the window: info label and timer button."""

    label_text: str
    button_text: str


def toggle_label(toggle: ToggleState) -> str:
    """Return the label text for a toggle value (``TICK``/``TOCK``)."""
    return toggle.name


def button_label(timer_active: bool) -> str:
    """Return the action offered by the button for the given timer flag."""
    return PAUSE_LABEL if timer_active else RESUME_LABEL


def render_view(state: TickerState) -> ViewText:
    return ViewText(
        label_text=toggle_label(state.toggle),
        button_text=button_label(state.timer_active),
    )


__all__ = ["PAUSE_LABEL", "RESUME_LABEL", "ViewText", "button_label", "render_view", "toggle_label"]
