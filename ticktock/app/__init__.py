"""Application composition layer for the Tkinter GUI.

Modules in this package wire the window, the Tk-based periodic timer and the
ticker view-model into a runnable desktop app without placing state logic in
views.
"""
