"""
pyq3rcon - Protocol layer
Handles the UDP socket, out-of-band framing and response routing.

Every datagram in both directions starts with four 0xFF bytes. Requests are
plain ASCII verbs (getstatus, rcon <password> <command>); responses start
with a header token (statusResponse, print) followed by a newline.
"""

import logging
import select
import socket
from enum import Enum
from typing import Callable, List, Optional

from .errors import MalformedFrame
from .models import Server

logger = logging.getLogger(__name__)


# =============================================================================
# Out-of-band Framing
# =============================================================================

OOB_MARKER = b"\xff\xff\xff\xff"

LINE_TERMINATOR = b"\n"

GETSTATUS_VERB = b"getstatus"
RCON_VERB = b"rcon"

STATUS_HEADER = b"statusResponse"
PRINT_HEADER = b"print"


def frame(payload: bytes) -> bytes:
    """Prefix a payload with the out-of-band marker"""
    return OOB_MARKER + payload


def unframe(datagram: bytes) -> bytes:
    """
    Strip the out-of-band marker from a datagram.

    Raises:
        MalformedFrame: datagram is shorter than the marker or does not start with it
    """
    if len(datagram) < len(OOB_MARKER):
        raise MalformedFrame(f"Datagram too short ({len(datagram)} bytes)")
    if not datagram.startswith(OOB_MARKER):
        raise MalformedFrame(f"Missing out-of-band marker: {datagram[:4]!r}")
    return datagram[len(OOB_MARKER):]


def strip_marker(raw: bytes) -> bytes:
    """Return raw without the out-of-band marker, if it carries one"""
    if raw.startswith(OOB_MARKER):
        return raw[len(OOB_MARKER):]
    return raw


def has_header(payload: bytes, header: bytes) -> bool:
    """True if payload is header on its own line, or header alone"""
    return payload == header or payload.startswith(header + LINE_TERMINATOR)


def strip_header(payload: bytes, header: bytes) -> Optional[bytes]:
    """
    Remove a response header token and the line terminator after it.

    Returns None when payload does not start with the header line, so
    "printable" is not mistaken for a print header.
    """
    if not has_header(payload, header):
        return None
    return payload[len(header) + len(LINE_TERMINATOR):]


# =============================================================================
# Response Routing
# =============================================================================

class ResponseKind(Enum):
    STATUS = "status"
    CONSOLE = "console"


def route_payload(payload: bytes) -> ResponseKind:
    """
    Decide which client an inbound payload belongs to.

    The protocol carries no request id, so the only routing signal is the
    payload shape: a payload whose first line is the statusResponse header
    is a status reply, anything else is console output for the rcon client.
    Both request kinds may be in flight at once; routing does not depend on
    send order, source port or timing.
    """
    if has_header(payload, STATUS_HEADER):
        return ResponseKind.STATUS
    return ResponseKind.CONSOLE


# =============================================================================
# Transport
# =============================================================================

# Upper bound on datagrams read by one poll() so a flood cannot stall update()
MAX_DATAGRAMS_PER_POLL = 64

class Transport:
    """Single UDP socket talking to one fixed server"""

    def __init__(self, server: Server, recv_buffer_size: int = 65536,
                 max_datagrams_per_poll: int = MAX_DATAGRAMS_PER_POLL):
        self.server = server
        self.recv_buffer_size = recv_buffer_size
        self.max_datagrams_per_poll = max_datagrams_per_poll
        self.socket: Optional[socket.socket] = None

        # Inbound event: handler(payload) for every unframed datagram
        self.on_payload: Optional[Callable[[bytes], None]] = None

    @property
    def is_open(self) -> bool:
        return self.socket is not None

    def open(self) -> bool:
        """Create the socket on an ephemeral local port. Returns True if successful."""
        if self.socket:
            return True
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as e:
            logger.error(f"Could not create UDP socket: {e}")
            return False
        try:
            sock.bind(("", 0))
            sock.connect(self.server.address)
            sock.setblocking(False)
        except OSError as e:
            sock.close()
            logger.error(f"Could not open UDP socket to {self.server}: {e}")
            return False
        self.socket = sock
        logger.debug(f"UDP socket open {sock.getsockname()} -> {self.server}")
        return True

    def close(self):
        """Release the socket"""
        if self.socket:
            try:
                self.socket.close()
            except OSError as e:
                logger.debug(f"Socket close failed: {e}")
            self.socket = None
            logger.debug(f"UDP socket to {self.server} closed")

    def send(self, payload: bytes) -> bool:
        """Frame and send one datagram. Never blocks; returns False on failure."""
        if not self.socket:
            logger.warning("Cannot send: transport not open")
            return False
        try:
            self.socket.send(frame(payload))
            return True
        except OSError as e:
            # Covers BlockingIOError and ICMP errors left over from earlier sends
            logger.warning(f"Send to {self.server} failed: {e}")
            return False

    def poll(self, timeout: float = 0.0) -> List[bytes]:
        """
        Wait up to timeout seconds for datagrams and return their payloads.

        Malformed datagrams are dropped. Lost datagrams are simply never
        returned; there is no retry. At most max_datagrams_per_poll datagrams
        are read per call; the rest wait in the socket buffer for the next one.
        """
        if not self.socket:
            return []

        payloads = []
        ready, _, _ = select.select([self.socket], [], [], timeout)
        if not ready:
            return []

        for _ in range(self.max_datagrams_per_poll):
            try:
                datagram = self.socket.recv(self.recv_buffer_size)
            except BlockingIOError:
                break
            except ConnectionRefusedError:
                # ICMP port unreachable from an earlier send
                logger.debug(f"{self.server} refused datagram")
                continue
            except OSError as e:
                logger.warning(f"Receive from {self.server} failed: {e}")
                break

            try:
                payload = unframe(datagram)
            except MalformedFrame as e:
                logger.debug(f"Dropping datagram: {e}")
                continue

            payloads.append(payload)
            if self.on_payload:
                self.on_payload(payload)

        return payloads

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
