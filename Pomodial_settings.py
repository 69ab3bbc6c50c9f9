import logging
import math
from dataclasses import dataclass

from PySide6.QtCore import QSettings

from Pomodial_session import DEFAULT_REMAINING_TIME, DEFAULT_TOTAL_TIME

logger = logging.getLogger(__name__)

BACKGROUNDS = ("white_marble", "dark_glow", "apple_gradient")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

# --- Dial Settings ---


@dataclass
class DialSettings:
    total_time: float = float(DEFAULT_TOTAL_TIME)
    remaining_time: float = float(DEFAULT_REMAINING_TIME)
    tick_interval: float = 1.0
    min_drag_distance: float = 10.0
    feedback_enabled: bool = True
    feedback_sound: str = ""
    feedback_volume: float = 0.5
    background: str = "white_marble"


def _as_float(store, key, default):
    raw = store.value(key, default)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Setting %s=%r is not a number, using %s", key, raw, default)
        return default
    if not math.isfinite(value):
        logger.warning("Setting %s=%r is not finite, using %s", key, raw, default)
        return default
    return value


def _as_bool(store, key, default):
    raw = store.value(key, default)
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    logger.warning("Setting %s=%r is not a boolean, using %s", key, raw, default)
    return default


def load_settings(store=None):
    """Read dial settings; bad values fall back to defaults instead of failing."""
    if store is None:
        store = QSettings("Pomodial", "Dial")
    d = DialSettings()

    total = _as_float(store, "total_time", d.total_time)
    if total <= 0:
        logger.warning("total_time must be positive, using %s", d.total_time)
        total = d.total_time

    remaining = _as_float(store, "remaining_time", d.remaining_time)
    if not 0 <= remaining <= total:
        clamped = min(max(remaining, 0.0), total)
        logger.warning("remaining_time %s outside [0, %s], using %s", remaining, total, clamped)
        remaining = clamped

    interval = _as_float(store, "tick_interval", d.tick_interval)
    if interval <= 0:
        logger.warning("tick_interval must be positive, using %s", d.tick_interval)
        interval = d.tick_interval

    drag = _as_float(store, "min_drag_distance", d.min_drag_distance)
    if drag < 0:
        logger.warning("min_drag_distance must not be negative, using %s", d.min_drag_distance)
        drag = d.min_drag_distance

    volume = min(max(_as_float(store, "feedback_volume", d.feedback_volume), 0.0), 1.0)

    background = str(store.value("background", d.background))
    if background not in BACKGROUNDS:
        logger.warning("Unknown background %r, using %s", background, d.background)
        background = d.background

    return DialSettings(
        total_time=total,
        remaining_time=remaining,
        tick_interval=interval,
        min_drag_distance=drag,
        feedback_enabled=_as_bool(store, "feedback_enabled", d.feedback_enabled),
        feedback_sound=str(store.value("feedback_sound", d.feedback_sound)),
        feedback_volume=volume,
        background=background,
    )
