"""
TickerWindowView
----------------
Tkinter main window for the TickTock demo. This file contains **only View
code**: no timer logic and no state. It exposes callback hooks that are
connected to the TickerVM by ``ticktock.app.main.App``.

The window provides:
  * Info label (shows "INFO" until the first refresh, then TICK/TOCK)
  * Timer button (Pause/Resume)
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import INFO_LABEL_STYLE, TIMER_BUTTON_STYLE, apply_dark_theme
from .view_utils import safe_call


class TickerWindowView(tk.Tk):
    """Fixed-size, non-resizable top-level window centred on screen."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(
        self,
        *,
        title: str,
        width: int = 250,
        height: int = 175,
        initial_label: str = "INFO",
        initial_button: str = "PAUSE / RESUME",
        font_size: int = 24,
        on_toggle_timer: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()

        self._on_toggle_timer = on_toggle_timer
        self._on_close = on_close

        # ---- Window basics ----
        self.title(title)
        self.resizable(False, False)
        apply_dark_theme(self, font_size=font_size)

        self._build_controls(width, height, initial_label, initial_button)
        self._centre(width, height)

        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_controls(self, width: int, height: int, label: str, button: str) -> None:
        content = ttk.Frame(self, width=width, height=height)
        content.pack(fill="both", expand=True)

        # Absolute placement: 25 px margin, two 200x50 rows.
        self.info_label = ttk.Label(content, text=label, style=INFO_LABEL_STYLE, anchor="center")
        self.info_label.place(x=25, y=25, width=width - 50, height=50)

        self.timer_button = ttk.Button(
            content,
            text=button,
            style=TIMER_BUTTON_STYLE,
            command=lambda: safe_call(self._on_toggle_timer),
        )
        self.timer_button.place(x=25, y=100, width=width - 50, height=50)

    def _centre(self, width: int, height: int) -> None:
        self.update_idletasks()
        x = max(0, (self.winfo_screenwidth() - width) // 2)
        y = max(0, (self.winfo_screenheight() - height) // 2)
        self.geometry(f"{width}x{height}+{x}+{y}")

    # ------------------------------------------------------------------
    # Public API used by the app
    # ------------------------------------------------------------------
    def set_label_text(self, text: str) -> None:
        self.info_label.configure(text=text)

    def set_button_text(self, text: str) -> None:
        self.timer_button.configure(text=text)

    def _handle_close(self) -> None:
        safe_call(self._on_close)
        self.destroy()
