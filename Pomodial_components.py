import math

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QLabel, QVBoxLayout, QWidget

from Pomodial_dial import dial_marks, label_position, pointer_angle, sector_span
from Pomodial_style import (BUTTON_COLOR, DIAL_SIZE, FACE_COLOR, RING_COLOR, SECTOR_COLOR,
                            BackgroundOption, background_brush)
from Pomodial_utils import format_time

# Dial proportions, in design units on a DIAL_SIZE canvas
SECTOR_RADIUS = 85
GESTURE_RADIUS = 82.5
BUTTON_RADIUS = 20
LABEL_DISTANCE = 100

# --- 1. MECHANICAL DIAL ---


class DialWidget(QWidget):
    """Kitchen-timer face: drag around it to set time, tap the knob to start/pause."""

    def __init__(self, timer, min_drag_distance=10, parent=None):
        super().__init__(parent)
        self.timer = timer
        self.min_drag_distance = min_drag_distance
        self.setMinimumSize(DIAL_SIZE, DIAL_SIZE)
        self.marks = dial_marks()

        self.button_scale = 1.0
        self.button_pressed = False
        self.press_pos = None
        self.is_dragging = False

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(40)
        shadow.setOffset(20, 20)
        shadow.setColor(QColor(0, 0, 0, 40))
        self.setGraphicsEffect(shadow)

        self.timer.add_listener(lambda _snap: self.update())

    # --- geometry ---
    def scale(self):
        return min(self.width(), self.height()) / DIAL_SIZE

    def center(self):
        return QPointF(self.width() / 2, self.height() / 2)

    def design_distance(self, pos):
        c = self.center()
        return math.hypot(pos.x() - c.x(), pos.y() - c.y()) / self.scale()

    # --- input ---
    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return
        pos = event.position()
        if self.design_distance(pos) <= BUTTON_RADIUS:
            self.button_pressed = True
            self.button_scale = 0.9
            self.update()
        elif self.design_distance(pos) <= GESTURE_RADIUS:
            self.press_pos = pos

    def mouseMoveEvent(self, event):
        if self.press_pos is None:
            return
        pos = event.position()
        if not self.is_dragging:
            moved = math.hypot(pos.x() - self.press_pos.x(), pos.y() - self.press_pos.y())
            if moved < self.min_drag_distance:
                return
            self.is_dragging = True
        c = self.center()
        self.timer.on_drag_changed(pointer_angle(pos.x(), pos.y(), c.x(), c.y()))

    def mouseReleaseEvent(self, event):
        if self.button_pressed:
            self.button_pressed = False
            self.button_scale = 1.0
            if self.design_distance(event.position()) <= BUTTON_RADIUS:
                self.timer.toggle()
            self.update()
        if self.is_dragging:
            self.timer.on_drag_ended()
        self.is_dragging = False
        self.press_pos = None

    # --- painting ---
    def paintEvent(self, event):
        snap = self.timer.snapshot()
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        c = self.center()
        painter.translate(c)
        painter.scale(self.scale(), self.scale())
        half = DIAL_SIZE / 2

        # Face
        painter.setPen(QPen(QColor(RING_COLOR), 6))
        painter.setBrush(QColor(FACE_COLOR))
        painter.drawEllipse(QRectF(-half + 3, -half + 3, DIAL_SIZE - 6, DIAL_SIZE - 6))

        # Remaining time sector, clockwise from 12 o'clock
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(SECTOR_COLOR))
        sector = QRectF(-SECTOR_RADIUS, -SECTOR_RADIUS, SECTOR_RADIUS * 2, SECTOR_RADIUS * 2)
        painter.drawPie(sector, 90 * 16, -int(sector_span(snap.remaining_time, snap.total_time) * 16))

        # Ticks and minute labels
        painter.setFont(QFont("Arial Rounded MT Bold", 11, QFont.Black))
        for mark in self.marks:
            a = math.radians(mark.angle_deg)
            inner, outer, width = (55, 85, 2) if mark.long else (75, 85, 1)
            painter.setPen(QPen(QColor(RING_COLOR), width, Qt.SolidLine, Qt.RoundCap))
            painter.drawLine(QPointF(inner * math.cos(a), inner * math.sin(a)),
                             QPointF(outer * math.cos(a), outer * math.sin(a)))
            if mark.label:
                x, y = label_position(mark.angle_deg, LABEL_DISTANCE, 0, 0)
                painter.drawText(QRectF(x - 12, y - 10, 24, 20), Qt.AlignCenter, mark.label)

        # Knob
        r = BUTTON_RADIUS * self.button_scale
        painter.setPen(QPen(QColor("#FFFFFF"), 2))
        painter.setBrush(QColor(BUTTON_COLOR))
        painter.drawEllipse(QPointF(0, 0), r, r)
        painter.end()


# --- 2. BACKGROUND + CLOCK PAGE ---


class BackgroundView(QWidget):
    def __init__(self, timer, option=BackgroundOption.WHITE_MARBLE, min_drag_distance=10, parent=None):
        super().__init__(parent)
        self.option = BackgroundOption(option)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        self.dial = DialWidget(timer, min_drag_distance=min_drag_distance)
        self.lbl_time = QLabel(format_time(timer.snapshot().remaining_time))
        self.lbl_time.setObjectName("BigTimer")
        self.lbl_time.setProperty("dark", self.option.is_dark)
        self.lbl_time.setAlignment(Qt.AlignCenter)

        layout.addStretch()
        layout.addWidget(self.dial, 0, Qt.AlignCenter)
        layout.addSpacing(20)
        layout.addWidget(self.lbl_time)
        layout.addStretch()

        self.brush = background_brush(self.option, self.width(), self.height())
        timer.add_listener(self.update_display)

    def update_display(self, snap):
        self.lbl_time.setText(format_time(snap.remaining_time))

    def resizeEvent(self, event):
        self.brush = background_brush(self.option, self.width(), self.height())
        super().resizeEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.brush)
        painter.end()
