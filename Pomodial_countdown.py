import logging
import time
from typing import Callable, Optional, Protocol

from Pomodial_session import TimerState

logger = logging.getLogger(__name__)

# --- Tick Source ---


class TickHandle(Protocol):
    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    def schedule(self, callback: Callable[[], None], interval: float) -> TickHandle: ...


# --- Countdown State Machine ---


class CountdownController:
    """Idle <-> Running countdown against a wall-clock deadline.

    Every tick recomputes the remaining time from `deadline - now`, so a
    late or skipped tick (sleep, busy event loop) never drifts the display.
    The tick handle lives exactly as long as the RUNNING state.
    """

    def __init__(self, session, scheduler: Optional[TickScheduler] = None,
                 clock: Callable[[], float] = time.time, tick_interval: float = 1.0,
                 on_expired: Optional[Callable[[], None]] = None,
                 on_tick: Optional[Callable[[], None]] = None):
        self.session = session
        self.scheduler = scheduler
        self.clock = clock
        self.tick_interval = tick_interval
        self.on_expired = on_expired
        self.on_tick = on_tick
        self._handle: Optional[TickHandle] = None

    @property
    def state(self) -> TimerState:
        return self.session.state

    def start(self, now: Optional[float] = None):
        s = self.session
        if s.running:
            return
        if now is None:
            now = self.clock()
        s.deadline = now + s.remaining_time
        s.state = TimerState.RUNNING
        if self.scheduler is not None:
            self._handle = self.scheduler.schedule(self._on_tick, self.tick_interval)
        logger.debug("Countdown started, %.1fs left", s.remaining_time)

    def tick(self, now: Optional[float] = None):
        s = self.session
        if not s.running:
            return
        if now is None:
            now = self.clock()
        s.remaining_time = min(s.total_time, max(0.0, s.deadline - now))
        if s.remaining_time == 0:
            self._stop()
            logger.info("Countdown finished")
            if self.on_expired is not None:
                self.on_expired()

    def pause(self):
        if not self.session.running:
            return
        self._stop()
        logger.debug("Countdown paused, %.1fs left", self.session.remaining_time)

    def _on_tick(self):
        self.tick(self.clock())
        if self.on_tick is not None:
            self.on_tick()

    def _stop(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self.session.deadline = None
        self.session.state = TimerState.IDLE
