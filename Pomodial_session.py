from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

# --- Timer Session State ---

DEFAULT_TOTAL_TIME = 60 * 60
DEFAULT_REMAINING_TIME = 25 * 60


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class DragAnchor:
    """Angle and remaining time captured on the first move of a drag."""
    angle: float
    remaining_time: float


class TimerSnapshot(NamedTuple):
    remaining_time: float
    total_time: float
    running: bool

    @property
    def fraction(self) -> float:
        return self.remaining_time / self.total_time


@dataclass
class TimerSession:
    """The one countdown shown on screen.

    `deadline` is only set while RUNNING and `drag_anchor` only while a
    gesture is in progress.
    """
    total_time: float = DEFAULT_TOTAL_TIME
    remaining_time: float = DEFAULT_REMAINING_TIME
    state: TimerState = TimerState.IDLE
    deadline: Optional[float] = None
    drag_anchor: Optional[DragAnchor] = None

    def __post_init__(self):
        if self.total_time <= 0:
            raise ValueError(f"total_time must be positive, got {self.total_time}")
        if not 0 <= self.remaining_time <= self.total_time:
            raise ValueError(
                f"remaining_time {self.remaining_time} outside [0, {self.total_time}]"
            )

    @property
    def running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def dragging(self) -> bool:
        return self.drag_anchor is not None

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(self.remaining_time, self.total_time, self.running)
