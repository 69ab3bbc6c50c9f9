"""Tests for loading dial settings from an INI-backed QSettings store."""

import pytest
from PySide6.QtCore import QSettings

from Pomodial_settings import DialSettings, load_settings
from Pomodial_timer import PomodoroTimer


@pytest.fixture
def store(tmp_path):
    return QSettings(str(tmp_path / "pomodial.ini"), QSettings.IniFormat)


def test_empty_store_gives_defaults(store) -> None:
    assert load_settings(store) == DialSettings()


def test_values_are_read(store) -> None:
    store.setValue("total_time", "1800")
    store.setValue("remaining_time", "300")
    store.setValue("tick_interval", "0.5")
    store.setValue("feedback_enabled", "false")
    store.setValue("feedback_volume", "0.8")
    store.setValue("background", "dark_glow")

    settings = load_settings(store)

    assert settings.total_time == 1800.0
    assert settings.remaining_time == 300.0
    assert settings.tick_interval == 0.5
    assert settings.feedback_enabled is False
    assert settings.feedback_volume == pytest.approx(0.8)
    assert settings.background == "dark_glow"


def test_bad_values_fall_back(store, caplog) -> None:
    store.setValue("total_time", "-10")
    store.setValue("tick_interval", "soon")
    store.setValue("min_drag_distance", "-1")
    store.setValue("feedback_enabled", "maybe")
    store.setValue("background", "plaid")

    settings = load_settings(store)

    assert settings.total_time == 3600.0
    assert settings.tick_interval == 1.0
    assert settings.min_drag_distance == 10.0
    assert settings.feedback_enabled is True
    assert settings.background == "white_marble"
    assert "not a number" in caplog.text


def test_remaining_is_clamped_into_dial_range(store) -> None:
    store.setValue("total_time", "600")
    store.setValue("remaining_time", "900")
    store.setValue("feedback_volume", "3")

    settings = load_settings(store)

    assert settings.remaining_time == 600.0
    assert settings.feedback_volume == 1.0


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_non_finite_values_fall_back(store, caplog, raw) -> None:
    for key in ("total_time", "remaining_time", "tick_interval", "min_drag_distance", "feedback_volume"):
        store.setValue(key, raw)

    settings = load_settings(store)

    assert settings == DialSettings()
    assert "not finite" in caplog.text


def test_non_finite_total_still_builds_a_timer(store) -> None:
    store.setValue("total_time", "nan")
    store.setValue("tick_interval", "inf")

    timer = PomodoroTimer.from_settings(load_settings(store))

    assert timer.snapshot() == (1500.0, 3600.0, False)
    assert timer.countdown.tick_interval == 1.0
