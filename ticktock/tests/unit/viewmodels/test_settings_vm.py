from __future__ import annotations

import dataclasses

import pytest

from ticktock.viewmodels.settings_vm import DEFAULT_INTERVAL_MS, TickerConfig


def test_defaults_match_demo_window() -> None:
    config = TickerConfig(debug_logging=False)

    assert config.interval_ms == DEFAULT_INTERVAL_MS == 500
    assert config.autostart is True
    assert (config.width, config.height) == (250, 175)
    assert config.initial_label == "INFO"


def test_construction_coerces_values() -> None:
    config = TickerConfig(
        interval_ms="250",  # type: ignore[arg-type]
        autostart="no",  # type: ignore[arg-type]
        title="  Demo  ",
        font_size=18.0,  # type: ignore[arg-type]
        debug_logging=0,  # type: ignore[arg-type]
    )

    assert config.interval_ms == 250
    assert config.autostart is False
    assert config.title == "Demo"
    assert config.font_size == 18
    assert config.debug_logging is False


@pytest.mark.parametrize(
    "raw",
    [0, -5, "abc", "2.5", True, None, [500], 250.7, float("inf"), float("-inf"), float("nan")],
)
def test_invalid_interval_is_rejected(raw) -> None:
    with pytest.raises(ValueError, match="interval_ms"):
        TickerConfig(interval_ms=raw, debug_logging=False)


@pytest.mark.parametrize("name", ["width", "height", "font_size"])
def test_other_sizes_must_be_positive_integers(name: str) -> None:
    with pytest.raises(ValueError, match=name):
        TickerConfig(**{name: 0.5}, debug_logging=False)


def test_replace_revalidates() -> None:
    base = TickerConfig(debug_logging=False)
    updated = dataclasses.replace(base, width=300)

    assert base.width == 250
    assert updated.width == 300
    with pytest.raises(ValueError, match="height"):
        dataclasses.replace(base, height=-1)
