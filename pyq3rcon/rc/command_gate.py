"""
Command Gate - Fixed-window throttle for outgoing rcon commands
"""

import logging
import threading
import time
from typing import Optional

logger = logging.getLogger(__name__)

MIN_COMMAND_INTERVAL = 1000  # ms


def now_ms() -> float:
    return time.monotonic() * 1000


class CommandGate:
    """Allow one command per min_interval milliseconds

    The window is measured from the last accepted command. A long idle period
    earns a single immediate accept, never a burst.
    """

    def __init__(self, min_interval: int = MIN_COMMAND_INTERVAL):
        self.min_interval = min_interval
        self.last_accepted_at: Optional[float] = None
        self._lock = threading.Lock()

    def try_accept(self, now: Optional[float] = None) -> bool:
        """Return True and start a new window if the interval has passed"""
        if now is None:
            now = now_ms()
        with self._lock:
            if self.last_accepted_at is not None and now - self.last_accepted_at < self.min_interval:
                logger.debug(f"Command rejected, {now - self.last_accepted_at:.0f} ms since last")
                return False
            self.last_accepted_at = now
            return True
