from __future__ import annotations

from typing import List

from ticktock.domain.events import EventKind
from ticktock.domain.toggle import ToggleState
from ticktock.viewmodels.display_format import ViewText
from ticktock.viewmodels.settings_vm import TickerConfig
from ticktock.viewmodels.ticker_vm import TickerVM

from ticktock.tests.unit.viewmodels.timer_stubs import FakeTimer


def _make_vm(*, active: bool = False, autostart: bool = True):
    timer = FakeTimer(active=active)
    renders: List[ViewText] = []
    vm = TickerVM(
        timer,
        config=TickerConfig(autostart=autostart, debug_logging=False),
        on_render=renders.append,
    )
    return vm, timer, renders


def test_vm_registers_itself_as_tick_listener() -> None:
    vm, timer, _ = _make_vm()
    assert timer.on_tick == vm.tick


def test_press_resumes_inactive_timer_and_keeps_label() -> None:
    vm, timer, renders = _make_vm(active=False)

    view = vm.press_button()

    assert timer.is_active() is True
    assert view == ViewText(label_text="TICK", button_text="Pause")
    assert renders == [view]


def test_tick_while_active_flips_label() -> None:
    vm, timer, renders = _make_vm(active=True)

    timer.fire()

    assert vm.state.toggle is ToggleState.TOCK
    assert renders[-1] == ViewText(label_text="TOCK", button_text="Pause")


def test_press_pauses_active_timer_and_no_ticks_follow() -> None:
    vm, timer, renders = _make_vm(active=True)

    view = vm.press_button()
    timer.fire()
    timer.fire()

    assert timer.is_active() is False
    assert view == ViewText(label_text="TICK", button_text="Resume")
    assert renders == [view]
    assert vm.view_text.label_text == "TICK"


def test_two_ticks_return_label_to_original() -> None:
    vm, timer, renders = _make_vm(active=True)

    timer.fire()
    timer.fire()

    assert [r.label_text for r in renders] == ["TOCK", "TICK"]
    assert vm.state.toggle is ToggleState.TICK


def test_unknown_event_is_ignored_without_render() -> None:
    vm, timer, renders = _make_vm(active=True)

    assert vm.handle("button_pressed") is None
    assert vm.handle(None) is None

    assert renders == []
    assert timer.calls == []
    assert vm.state.toggle is ToggleState.TICK


def test_handle_accepts_tagged_events_directly() -> None:
    vm, timer, _ = _make_vm(active=False)

    vm.handle(EventKind.BUTTON_PRESSED)
    vm.handle(EventKind.TIMER_TICK)

    assert timer.calls == ["start"]
    assert vm.view_text == ViewText(label_text="TOCK", button_text="Pause")


def test_start_with_autostart_runs_timer_and_renders() -> None:
    vm, timer, renders = _make_vm(active=False, autostart=True)

    view = vm.start()

    assert timer.calls == ["start"]
    assert view == ViewText(label_text="TICK", button_text="Pause")
    assert renders == [view]


def test_start_without_autostart_only_renders() -> None:
    vm, timer, renders = _make_vm(active=False, autostart=False)

    view = vm.start()

    assert timer.calls == []
    assert view == ViewText(label_text="TICK", button_text="Resume")
    assert renders == [view]


def test_refresh_is_idempotent() -> None:
    vm, _, renders = _make_vm(active=True)

    first = vm.refresh()
    second = vm.refresh()

    assert first == second
    assert vm.state.toggle is ToggleState.TICK
    assert len(renders) == 2


def test_refresh_picks_up_external_timer_changes() -> None:
    vm, timer, _ = _make_vm(active=True)

    timer.stop()

    assert vm.refresh().button_text == "Resume"


def test_shutdown_stops_timer() -> None:
    vm, timer, _ = _make_vm(active=True)

    vm.shutdown()

    assert timer.is_active() is False


def test_vm_without_render_callback_still_returns_view() -> None:
    timer = FakeTimer(active=True)
    vm = TickerVM(timer, config=TickerConfig(debug_logging=False))

    assert vm.tick() == ViewText(label_text="TOCK", button_text="Pause")
