from enum import Enum

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QLinearGradient, QRadialGradient

# --- 1. CONFIGURATION & STYLES ---
STYLESHEET = """
QWidget { font-family: 'Segoe UI', sans-serif; color: #2D3436; }
QLabel { border: none; background: transparent; }
QLabel#BigTimer { font-size: 40px; font-weight: 800; color: #2D3436; }
QLabel#BigTimer[dark="true"] { color: #F5F6FA; }
"""

DIAL_SIZE = 240
FACE_COLOR = "#FFFFFF"
RING_COLOR = "#000000"
SECTOR_COLOR = "#E53935"
BUTTON_COLOR = "#8E8E93"

# --- 2. BACKGROUNDS ---


class BackgroundOption(str, Enum):
    WHITE_MARBLE = "white_marble"
    DARK_GLOW = "dark_glow"
    APPLE_GRADIENT = "apple_gradient"

    @property
    def is_dark(self):
        return self is BackgroundOption.DARK_GLOW


def background_brush(option, width, height):
    if option is BackgroundOption.DARK_GLOW:
        center = QPointF(width / 2, height / 2)
        grad = QRadialGradient(center, 500)
        grad.setColorAt(0.0, QColor(0, 0, 0))
        grad.setColorAt(1.0, QColor(0, 0, 0, 153))
        return QBrush(grad)

    if option is BackgroundOption.APPLE_GRADIENT:
        grad = QLinearGradient(QPointF(0, 0), QPointF(width, height))
        grad.setColorAt(0.0, QColor(Qt.red))
        grad.setColorAt(1.0, QColor(Qt.blue))
        return QBrush(grad)

    # White marble
    grad = QLinearGradient(QPointF(0, 0), QPointF(width, height))
    grad.setColorAt(0.0, QColor("#FAFAFA"))
    grad.setColorAt(0.55, QColor("#F1F1F3"))
    grad.setColorAt(1.0, QColor("#E4E4E7"))
    return QBrush(grad)
