import logging
import os

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtWidgets import QApplication

from Pomodial_utils import resource_path

logger = logging.getLogger(__name__)

# --- Click Feedback (desktop stand-in for a haptic tick) ---


class SoundFeedback:
    def __init__(self, sound_file="", volume=0.5):
        self.effect = QSoundEffect()
        self.effect.setLoopCount(1)
        self.effect.setVolume(volume)
        self.loaded = False
        self.load_sound(sound_file)

    def load_sound(self, file_path):
        # No file configured: the system beep is the click
        if not file_path:
            self.loaded = False
            return
        # A user file first, then the bundled resource
        if os.path.isfile(file_path):
            path = file_path
        else:
            path = resource_path(file_path)
        if not os.path.isfile(path):
            logger.info("No click sound at %s, falling back to system beep", path)
            self.loaded = False
            return
        self.effect.setSource(QUrl.fromLocalFile(path))
        self.loaded = True

    def notify_boundary(self):
        if self.loaded and self.effect.status() != QSoundEffect.Status.Error:
            self.effect.play()
        else:
            QApplication.beep()
