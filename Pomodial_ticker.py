from PySide6.QtCore import QTimer

# --- QTimer backed tick source ---


class QtTickHandle:
    def __init__(self, callback, interval_ms, parent=None):
        self.timer = QTimer(parent)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(callback)
        self.timer.start()

    def cancel(self):
        # May be called from inside the timeout slot itself
        self.timer.stop()
        self.timer.deleteLater()


class QtTickScheduler:
    def __init__(self, parent=None):
        self.parent = parent

    def schedule(self, callback, interval):
        return QtTickHandle(callback, max(1, int(interval * 1000)), self.parent)
