import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from Pomodial_session import TimerSession


class RecordingFeedback:
    def __init__(self):
        self.calls = 0

    def notify_boundary(self):
        self.calls += 1


class FakeHandle:
    def __init__(self, callback, interval):
        self.callback = callback
        self.interval = interval
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        assert not self.cancelled
        self.callback()


class FakeScheduler:
    def __init__(self):
        self.handles = []

    def schedule(self, callback, interval):
        handle = FakeHandle(callback, interval)
        self.handles.append(handle)
        return handle

    @property
    def active(self):
        return [h for h in self.handles if not h.cancelled]


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def feedback():
    return RecordingFeedback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session():
    return TimerSession(total_time=3600.0, remaining_time=1500.0)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])
