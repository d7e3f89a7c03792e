"""Single-slot, self-dismissing error notification."""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Holds at most one message; it expires `dismiss_after` seconds after
    the latest `report()`.

    Streamlit redraws on every interaction, so expiry is checked when the
    slot is read rather than with a timer.
    """
    def __init__(self, dismiss_after: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.dismiss_after = dismiss_after
        self._clock = clock
        self._message: Optional[str] = None
        self._reported_at = 0.0

    def report(self, message: str) -> None:
        logger.warning("%s", message)
        self._message = str(message)
        self._reported_at = self._clock()

    def current(self) -> Optional[str]:
        """The visible message, or None once it has expired."""
        if self._message is None:
            return None
        if self._clock() - self._reported_at >= self.dismiss_after:
            self._message = None
        return self._message

    def remaining(self) -> float:
        """Seconds until the current message is dismissed (0 when empty)."""
        if self.current() is None:
            return 0.0
        return max(0.0, self.dismiss_after - (self._clock() - self._reported_at))

    def clear(self) -> None:
        self._message = None
