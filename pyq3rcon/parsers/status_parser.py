"""
Status Parser - Parses getstatus responses into Status objects
"""

import logging
import re

from ..errors import InvalidStatusPayload, UnparseablePlayerLine
from ..models import Player, Status
from ..protocol import STATUS_HEADER, strip_header, strip_marker

logger = logging.getLogger(__name__)

# score ping "name"
PLAYER_LINE = re.compile(r'^\s*(-?\d+)\s+(-?\d+)\s+"(.*)"\s*$')

VARIABLE_DELIMITER = "\\"


class StatusParser:
    """Parser for statusResponse payloads

    Payload layout after the header line:

        \\key\\value\\key\\value...
        score ping "name"
        score ping "name"
    """

    @staticmethod
    def parse(raw: bytes) -> Status:
        """Parse a status payload, with or without the out-of-band marker

        Raises:
            InvalidStatusPayload: payload is empty or lacks the statusResponse header
        """
        if not raw:
            raise InvalidStatusPayload("Empty status payload")

        body = strip_header(strip_marker(raw), STATUS_HEADER)
        if body is None:
            raise InvalidStatusPayload(f"Missing {STATUS_HEADER.decode()} header: {raw[:20]!r}")

        lines = body.decode('latin-1').split('\n')
        variables = StatusParser.parse_variables(lines[0])

        players = []
        for line in lines[1:]:
            if not line.strip():
                continue
            try:
                players.append(StatusParser.parse_player(line))
            except UnparseablePlayerLine as e:
                logger.debug(str(e))

        return Status(variables=variables, players=players)

    @staticmethod
    def parse_variables(block: str) -> dict:
        """Pair up \\key\\value tokens; an odd trailing key is dropped"""
        tokens = block.rstrip('\r').split(VARIABLE_DELIMITER)
        if tokens and tokens[0] == "":
            tokens = tokens[1:]

        variables = {}
        for i in range(0, len(tokens) - 1, 2):
            variables[tokens[i]] = tokens[i + 1]
        return variables

    @staticmethod
    def parse_player(line: str) -> Player:
        match = PLAYER_LINE.match(line)
        if not match:
            raise UnparseablePlayerLine(line)
        score, ping, name = match.groups()
        return Player(score=int(score), ping=int(ping), name=name)
