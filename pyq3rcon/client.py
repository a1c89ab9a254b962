"""
pyq3rcon - Query Client
Sends getstatus requests and turns status responses into Status objects.
"""

import logging
import time
from typing import Optional

from .models import Status
from .parsers.status_parser import StatusParser
from .protocol import GETSTATUS_VERB, Transport

logger = logging.getLogger(__name__)


class QueryClient:
    """
    Out-of-band status query client.

    Usage:
        transport = Transport(Server("localhost", 27960))
        transport.open()
        query = QueryClient(transport)
        query.send()
        for payload in transport.poll(1.0):
            status = query.receive(payload)
    """

    def __init__(self, transport: Transport):
        self.transport = transport
        self._sent_at: Optional[float] = None
        self._ping = 0

    @property
    def ping(self) -> int:
        """Round trip of the last answered getstatus in ms, 0 if unknown"""
        return self._ping

    def send(self) -> bool:
        """Send a getstatus request"""
        if not self.transport.send(GETSTATUS_VERB):
            return False
        self._sent_at = time.monotonic()
        return True

    def receive(self, payload: bytes) -> Status:
        """
        Parse a status response payload.

        Raises:
            InvalidStatusPayload: payload is not a status response
        """
        status = StatusParser.parse(payload)
        if self._sent_at is not None:
            self._ping = max(1, int((time.monotonic() - self._sent_at) * 1000))
            self._sent_at = None
        logger.debug(f"Status from {self.transport.server}: "
                     f"{len(status.variables)} variables, {len(status.players)} players")
        return status
