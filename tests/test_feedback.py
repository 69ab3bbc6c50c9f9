import logging

from PySide6.QtWidgets import QApplication

from Pomodial_audio import SoundFeedback
from Pomodial_feedback import NullFeedback, SafeFeedback
from Pomodial_settings import DialSettings


def test_null_feedback_does_nothing() -> None:
    assert NullFeedback().notify_boundary() is None


def test_safe_feedback_forwards(feedback) -> None:
    SafeFeedback(feedback).notify_boundary()
    assert feedback.calls == 1


def test_safe_feedback_swallows_and_logs(caplog) -> None:
    class Exploding:
        def notify_boundary(self):
            raise OSError("haptic engine unavailable")

    with caplog.at_level(logging.WARNING, logger="Pomodial_feedback"):
        SafeFeedback(Exploding()).notify_boundary()

    assert "Boundary feedback failed" in caplog.text


def test_sound_feedback_without_a_file_beeps(qapp, monkeypatch) -> None:
    beeps = []
    monkeypatch.setattr(QApplication, "beep", staticmethod(lambda: beeps.append(True)))
    sound = SoundFeedback(DialSettings().feedback_sound)

    sound.notify_boundary()

    assert not sound.loaded
    assert beeps == [True]


def test_sound_feedback_missing_file_beeps(qapp, tmp_path) -> None:
    sound = SoundFeedback(str(tmp_path / "missing.wav"))

    assert not sound.loaded
