"""
pyq3rcon - Session
Ties the query client, rcon client, command gate and transcript together
for one server connection.
"""

import logging
import time
from typing import Callable, List, Optional, Tuple

from .client import QueryClient
from .config.client_config import SessionConfig
from .errors import InvalidStatusPayload
from .models import Output, Server, Status
from .protocol import ResponseKind, Transport, route_payload
from .rc.command_gate import CommandGate, now_ms
from .rc.rc_client import RconClient
from .rc.transcript import TranscriptLogger

logger = logging.getLogger(__name__)


class Session:
    """
    One administration session against one server.

    Usage:
        session = Session(Server("localhost", 27960), "secret")
        session.on_output = lambda line: print(line.to_plain_text())
        session.open()
        session.send_command("status")
        while running:
            session.update(timeout=0.1)
        session.close()

    update() must be called regularly. It sends getstatus every
    getstatus_interval ms and dispatches every datagram that arrived.
    """

    def __init__(self, server: Server, password: str, config: Optional[SessionConfig] = None):
        self.server = server
        self.config = (config or SessionConfig()).validate()

        self.transport = Transport(server, self.config.recv_buffer_size)
        self.query = QueryClient(self.transport)
        self.rcon = RconClient(self.transport, password)
        self.gate = CommandGate(self.config.min_command_interval)
        self.transcript = TranscriptLogger(
            server,
            enabled=self.config.logging_enabled,
            log_dir=self.config.log_dir,
            file_format=self.config.log_file_format,
        )

        # Latest status; replaced on every successful parse
        self.status: Optional[Status] = None

        # Status callback: handler(status)
        self.on_status: Optional[Callable[[Status], None]] = None

        # Console callback: handler(output) for each line
        self.on_output: Optional[Callable[[Output], None]] = None

        # Sent command callback: handler(command) with the password masked
        self.on_command: Optional[Callable[[str], None]] = None

        self._running = False
        self._next_status_at: Optional[float] = None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def open(self) -> bool:
        """Open the socket and start the status poll. Returns True if successful."""
        if not self.transport.open():
            return False
        self._running = True
        self._next_status_at = now_ms()
        logger.info(f"Session opened to {self.server}")
        return True

    def close(self):
        """Stop the status poll and release the socket"""
        if not self._running:
            return
        self._running = False
        self._next_status_at = None
        self.transport.close()
        logger.info(f"Session to {self.server} closed")

    @property
    def running(self) -> bool:
        return self._running

    # =========================================================================
    # Sending
    # =========================================================================

    def request_status(self) -> bool:
        """Send getstatus now, outside the periodic schedule"""
        if not self._running:
            return False
        return self.query.send()

    def send_command(self, command: str, now: Optional[float] = None) -> bool:
        """
        Send an rcon command.

        Commands arriving less than min_command_interval ms after the last
        accepted one are dropped and False is returned.
        """
        if not self._running or not command:
            return False
        if not self.gate.try_accept(now):
            return False

        line = self.rcon.redact(command)
        self.transcript.log_command(line)
        if self.on_command:
            self.on_command(line)
        return self.rcon.send(command)

    # =========================================================================
    # Update Loop
    # =========================================================================

    def update(self, timeout: float = 0.01, now: Optional[float] = None) -> List[Tuple[ResponseKind, bytes]]:
        """
        Fire the status poll when due, then process incoming datagrams.

        Args:
            timeout: How long to wait for datagrams (seconds)
            now: Current time in ms, for driving the schedule manually

        Returns:
            List of (kind, payload) tuples received
        """
        if not self._running:
            return []

        self._poll_status_if_due(now_ms() if now is None else now)

        received = []
        for payload in self.transport.poll(timeout):
            received.append((self.dispatch(payload), payload))
        return received

    def run(self, duration: float, timeout: float = 0.05):
        """Call update() repeatedly for duration seconds"""
        end = time.monotonic() + duration
        while self._running and time.monotonic() < end:
            self.update(timeout=min(timeout, max(0.0, end - time.monotonic())))

    def dispatch(self, payload: bytes) -> ResponseKind:
        """Route one unframed payload to the status or console handler"""
        kind = route_payload(payload)
        if kind is ResponseKind.STATUS:
            self._handle_status(payload)
        else:
            self._handle_console(payload)
        return kind

    def _poll_status_if_due(self, now: float):
        if self._next_status_at is None or now < self._next_status_at:
            return
        self.query.send()
        self._next_status_at = now + self.config.getstatus_interval

    def _handle_status(self, payload: bytes):
        try:
            status = self.query.receive(payload)
        except InvalidStatusPayload as e:
            logger.warning(f"Ignoring status from {self.server}: {e}")
            return

        self.status = status
        if self.on_status:
            self.on_status(status)

    def _handle_console(self, payload: bytes):
        for output in self.rcon.receive(payload):
            self.transcript.log_output(output)
            if self.on_output:
                self.on_output(output)

    # =========================================================================
    # Display helpers
    # =========================================================================

    def title_summary(self) -> str:
        """Title text for the last status, empty before the first one"""
        if self.status is None:
            return ""
        return self.status.title_summary(self.query.ping)

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
