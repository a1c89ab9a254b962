"""
Rcon Client - Sends password-authenticated console commands
"""

import logging
import re
from typing import List

from ..models import Output
from ..parsers.output_parser import OutputParser
from ..protocol import RCON_VERB, Transport

logger = logging.getLogger(__name__)

REDACTED = "*****"


class RconClient:
    """Remote console client

    Every command goes out as `rcon <password> <command>`; the server answers
    with print payloads. The password is given once here and never logged.
    """

    def __init__(self, transport: Transport, password: str):
        self.transport = transport
        self._password = password

    def build_request(self, command: str) -> bytes:
        """Request payload without the out-of-band marker"""
        return b" ".join([
            RCON_VERB,
            self._password.encode('latin-1', errors='replace'),
            command.encode('latin-1', errors='replace'),
        ])

    def redact(self, text: str) -> str:
        """Mask the password wherever it appears as a whole word in text

        Only whitespace-delimited tokens equal to the password are masked, so
        a short password such as "q3" leaves "map q3dm6" alone.
        """
        if not self._password:
            return text
        pattern = r"(?<!\S)" + re.escape(self._password) + r"(?!\S)"
        return re.sub(pattern, REDACTED, text)

    def send(self, command: str) -> bool:
        """Send a console command"""
        logger.debug(f"rcon {REDACTED} {self.redact(command)} -> {self.transport.server}")
        return self.transport.send(self.build_request(command))

    def receive(self, payload: bytes) -> List[Output]:
        """Parse a console output payload into lines"""
        return OutputParser.parse(payload)
