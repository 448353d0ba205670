"""Shared visual theme for the ticker window.

Flat dark ttk styling kept out of the view class so the window only does
layout and callback wiring.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

INFO_LABEL_STYLE = "Info.TLabel"
TIMER_BUTTON_STYLE = "Timer.TButton"


def apply_dark_theme(root: tk.Misc, *, font_size: int = 24) -> None:
    """Apply a flat dark ttk + tk theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
        font_size: Point size for the info label and timer button.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    bg = "#3c3f41"
    button_bg = "#4c5052"
    border = "#5e6060"
    accent = "#4a88c7"
    text = "#dfe1e5"
    big_font = ("Helvetica", font_size)

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=bg)

    style.configure(".", background=bg, foreground=text)
    style.configure("TFrame", background=bg)
    style.configure("TLabel", background=bg, foreground=text)
    style.configure(INFO_LABEL_STYLE, background=bg, foreground=text, font=big_font, anchor="center")

    style.configure(
        "TButton",
        padding=(10, 6),
        background=button_bg,
        foreground=text,
        bordercolor=border,
        relief="flat",
    )
    style.map("TButton", background=[("active", "#5a5d5f"), ("pressed", accent)])
    style.configure(TIMER_BUTTON_STYLE, font=big_font)
