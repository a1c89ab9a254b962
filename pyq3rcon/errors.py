"""
pyq3rcon - Errors
Exception types raised by the protocol and parsing layer.
"""


class RconError(Exception):
    """Base class for all pyq3rcon errors"""
    pass


class MalformedFrame(RconError):
    """Datagram is too short or lacks the out-of-band marker"""
    pass


class InvalidStatusPayload(RconError):
    """Status payload is empty or has no statusResponse header"""
    pass


class UnparseablePlayerLine(RconError):
    """A player line does not have the `score ping "name"` shape"""

    def __init__(self, line: str):
        super().__init__(f"Unparseable player line: {line!r}")
        self.line = line


class LogWriteFailure(RconError):
    """Transcript file could not be opened or written"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not write to {path}: {reason}")
        self.path = path
        self.reason = reason
