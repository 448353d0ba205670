"""ViewModel package for UI state and command surfaces.

Call context:
    ``ticktock/app/main.py`` imports concrete viewmodels from this package to
    bind view callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and lightweight formatting
    helpers only. Tk widgets and timers remain outside behind ports.
"""
