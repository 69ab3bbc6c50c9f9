import logging
import os
import sys

from PySide6.QtWidgets import QApplication, QMainWindow

from Pomodial_audio import SoundFeedback
from Pomodial_components import BackgroundView
from Pomodial_feedback import NullFeedback
from Pomodial_settings import load_settings
from Pomodial_style import STYLESHEET
from Pomodial_ticker import QtTickScheduler
from Pomodial_timer import PomodoroTimer


def setup_logging():
    level = os.environ.get("POMODIAL_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# --- MAIN WINDOW ---

class MainWindow(QMainWindow):
    def __init__(self, settings=None):
        super().__init__()
        self.setWindowTitle("Pomodial")
        self.resize(400, 550)

        self.settings = settings or load_settings()
        if self.settings.feedback_enabled:
            self.feedback = SoundFeedback(self.settings.feedback_sound, self.settings.feedback_volume)
        else:
            self.feedback = NullFeedback()

        self.timer = PomodoroTimer.from_settings(
            self.settings,
            feedback=self.feedback,
            scheduler=QtTickScheduler(self),
            on_expired=self.on_expired,
        )

        self.view = BackgroundView(
            self.timer,
            option=self.settings.background,
            min_drag_distance=self.settings.min_drag_distance,
        )
        self.setCentralWidget(self.view)
        logging.info("Pomodial ready: %.0fs of %.0fs", self.settings.remaining_time, self.settings.total_time)

    def on_expired(self):
        self.timer.feedback.notify_boundary()

    def closeEvent(self, event):
        self.timer.pause()
        super().closeEvent(event)


def main():
    setup_logging()
    app = QApplication(sys.argv)
    app.setStyleSheet(STYLESHEET)
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
