import logging
from typing import Protocol

logger = logging.getLogger(__name__)

# --- Boundary Feedback Port ---


class FeedbackPort(Protocol):
    def notify_boundary(self) -> None: ...


class NullFeedback:
    """Used when the machine has no way to click or buzz."""

    def notify_boundary(self):
        pass


class SafeFeedback:
    """Fire-and-forget wrapper: a broken feedback device never reaches the timer."""

    def __init__(self, port):
        self.port = port

    def notify_boundary(self):
        try:
            self.port.notify_boundary()
        except Exception:
            logger.warning("Boundary feedback failed", exc_info=True)
