import logging
import math
from typing import NamedTuple

from Pomodial_feedback import NullFeedback, SafeFeedback
from Pomodial_session import DragAnchor

logger = logging.getLogger(__name__)

TAU = 2 * math.pi
# Effective single-turn range, a full circle starting at the 12 o'clock offset
MIN_ANGLE = -math.pi / 2
MAX_ANGLE = 3 * math.pi / 2

# --- 1. POINTER / DIAL GEOMETRY ---


def pointer_angle(x, y, cx, cy):
    """Angle of the pointer around the dial centre (screen coords, y down)."""
    return math.atan2(x - cx, y - cy) + math.pi / 2


def clamp_angle(angle):
    return max(min(angle, MAX_ANGLE), MIN_ANGLE)


def sector_span(remaining_time, total_time):
    """Degrees of the remaining-time sector, swept clockwise from 12 o'clock."""
    return 360.0 * remaining_time / total_time


def sector_end_angle(remaining_time, total_time):
    return TAU * remaining_time / total_time - math.pi / 2


class DialMark(NamedTuple):
    index: int
    angle_deg: float
    long: bool
    label: str


def dial_marks(count=60, label_every=5):
    marks = []
    for i in range(count):
        is_long = i % label_every == 0
        marks.append(DialMark(i, i * 360.0 / count - 90, is_long, str(i) if is_long else ""))
    return marks


def label_position(angle_deg, distance, cx, cy):
    a = math.radians(angle_deg)
    return cx + distance * math.cos(a), cy + distance * math.sin(a)


# --- 2. DRAG TO DURATION MAPPING ---


class DialMapper:
    """Maps a drag around the dial onto the session's remaining time.

    A full turn covers the whole `total_time` range. The anchor captured on
    the first move of a gesture is the reference for every later move, so
    the value follows the finger relative to where the drag began.
    """

    def __init__(self, feedback=None):
        self.feedback = SafeFeedback(feedback or NullFeedback())

    def on_drag_changed(self, session, angle):
        if session.running:
            logger.debug("Drag ignored while running")
            self.feedback.notify_boundary()
            return

        if session.drag_anchor is None:
            session.drag_anchor = DragAnchor(angle, session.remaining_time)
            logger.debug("Drag anchored at %.3f rad, %.1fs", angle, session.remaining_time)
        anchor = session.drag_anchor
        total = session.total_time

        candidate = anchor.remaining_time + total * (anchor.angle - angle) / TAU
        if candidate <= 0:
            session.remaining_time = 0.0
            self.feedback.notify_boundary()
        elif candidate >= total:
            session.remaining_time = total
            self.feedback.notify_boundary()
        else:
            clamped = clamp_angle(angle)
            value = anchor.remaining_time + total * (anchor.angle - clamped) / TAU
            # only reachable with an anchor outside the clamp range
            if value < 0 or value > total:
                value = min(max(value, 0.0), total)
                self.feedback.notify_boundary()
            session.remaining_time = value

    def on_drag_ended(self, session):
        session.drag_anchor = None
