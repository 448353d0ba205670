"""TickTock desktop timer demo (Tkinter, MVVM)."""

__version__ = "0.1.0"
