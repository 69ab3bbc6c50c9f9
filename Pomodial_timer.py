import logging
import time

from Pomodial_countdown import CountdownController
from Pomodial_dial import DialMapper
from Pomodial_session import TimerSession

logger = logging.getLogger(__name__)

# --- Pomodoro Timer (host facing) ---


class PomodoroTimer:
    """Owns the session plus its dial mapper and countdown.

    This is the whole surface the window talks to. Listeners are called with
    a fresh snapshot after every call that may have changed what is drawn.
    """

    def __init__(self, total_time=None, remaining_time=None, feedback=None,
                 scheduler=None, clock=time.time, tick_interval=1.0, on_expired=None):
        session_kwargs = {}
        if total_time is not None:
            session_kwargs["total_time"] = float(total_time)
        if remaining_time is not None:
            session_kwargs["remaining_time"] = float(remaining_time)
        self.session = TimerSession(**session_kwargs)
        self.dial = DialMapper(feedback)
        self.feedback = self.dial.feedback
        self.countdown = CountdownController(
            self.session, scheduler=scheduler, clock=clock,
            tick_interval=tick_interval, on_expired=on_expired, on_tick=self._notify,
        )
        self.listeners = []

    @classmethod
    def from_settings(cls, settings, feedback=None, scheduler=None, clock=time.time, on_expired=None):
        return cls(
            total_time=settings.total_time,
            remaining_time=settings.remaining_time,
            feedback=feedback,
            scheduler=scheduler,
            clock=clock,
            tick_interval=settings.tick_interval,
            on_expired=on_expired,
        )

    @property
    def running(self):
        return self.session.running

    def snapshot(self):
        return self.session.snapshot()

    def add_listener(self, listener):
        self.listeners.append(listener)

    def remove_listener(self, listener):
        if listener in self.listeners:
            self.listeners.remove(listener)

    # --- Host -> core ---

    def on_drag_changed(self, angle):
        self.dial.on_drag_changed(self.session, angle)
        self._notify()

    def on_drag_ended(self):
        self.dial.on_drag_ended(self.session)

    def start(self, now=None):
        self.countdown.start(now)
        self._notify()

    def pause(self):
        self.countdown.pause()
        self._notify()

    def toggle(self, now=None):
        if self.running:
            self.pause()
        else:
            self.start(now)

    def tick(self, now=None):
        self.countdown.tick(now)
        self._notify()

    def _notify(self):
        snap = self.snapshot()
        for listener in list(self.listeners):
            listener(snap)
