# ticktock/app/main.py
from __future__ import annotations
import logging
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_window import TickerWindowView
from .views.view_utils import safe_call

# ---- Timer adapter ----
from .periodic_timer import PeriodicTimer

# ---- ViewModels ----
from ..viewmodels.display_format import ViewText
from ..viewmodels.settings_vm import TickerConfig
from ..viewmodels.ticker_vm import TickerVM
from ..utils import logging as logging_utils


class App:
    """Bootstrap: wire the window <-> TickerVM through a Tk ``after`` timer."""

    def __init__(self, config: Optional[TickerConfig] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.config = config or TickerConfig()
        self._configure_logging()

        self.win = TickerWindowView(
            title=self.config.title,
            width=self.config.width,
            height=self.config.height,
            initial_label=self.config.initial_label,
            initial_button=self.config.initial_button,
            font_size=self.config.font_size,
            on_toggle_timer=self._on_toggle_timer,
            on_close=self._on_close,
        )
        self._wire(self.win)

    def _wire(self, win) -> None:
        """Create the timer and view-model on top of ``win``'s scheduler."""
        self.timer = PeriodicTimer(win.after, win.after_cancel, self.config.interval_ms)
        self.ticker_vm = TickerVM(
            self.timer,
            config=self.config,
            on_render=self._apply_view,
        )

    def _configure_logging(self) -> None:
        level = logging_utils.configure_root(self.config.debug_logging)
        self._log.debug("Effective GUI log level: %s", logging_utils.level_name(level))

    # ==================================================================
    # View callbacks
    # ==================================================================
    def _on_toggle_timer(self) -> None:
        self.ticker_vm.press_button()

    def _on_close(self) -> None:
        self._log.debug("Window closing; stopping timer")
        self.ticker_vm.shutdown()

    def _apply_view(self, view: ViewText) -> None:
        safe_call(self.win.set_label_text, view.label_text)
        safe_call(self.win.set_button_text, view.button_text)

    # ==================================================================
    def start(self) -> None:
        """Show initial state; starts the timer when configured to."""
        self.ticker_vm.start()

    def run(self) -> None:
        self.start()
        self.win.mainloop()


def main() -> None:
    app = App()
    app.run()


if __name__ == "__main__":
    main()
