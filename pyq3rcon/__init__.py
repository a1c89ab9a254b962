"""
pyq3rcon - A minimal Python client for Quake III style server administration

Usage:
    from pyq3rcon import Server, Session

    session = Session(Server("localhost", 27960), "rcon_password")
    session.on_status = lambda status: print(status.status_line())
    session.on_output = lambda line: print(line.to_plain_text())
    session.open()
    session.send_command("status")
    session.run(5.0)
    session.close()

Or with context manager:
    with Session(Server.parse("localhost:27960"), "rcon_password") as session:
        session.send_command("serverinfo")
        session.run(2.0)

Parsing only:
    from pyq3rcon import StatusParser, OutputParser

    status = StatusParser.parse(payload)
    for player in status.players:
        print(player.score, player.ping, player.clean_name)

    lines = OutputParser.parse(b"print\\n^2Player1^7 was kicked\\n")
    print(lines[0].to_markup())
"""

__version__ = "1.0.0"

from .client import QueryClient
from .config import SessionConfig, ConfigValidationError
from .errors import (
    RconError,
    MalformedFrame,
    InvalidStatusPayload,
    UnparseablePlayerLine,
    LogWriteFailure
)
from .models import Server, Status, Player, Output, ColorRun, Color
from .parsers import StatusParser, OutputParser
from .protocol import Transport, ResponseKind, frame, unframe, route_payload
from .rc import RconClient, CommandGate, TranscriptLogger, RconCommands, load_command_list
from .session import Session

__all__ = [
    "Session",
    "Server",
    "Status",
    "Player",
    "Output",
    "ColorRun",
    "Color",
    "Transport",
    "ResponseKind",
    "frame",
    "unframe",
    "route_payload",
    "QueryClient",
    "RconClient",
    "CommandGate",
    "TranscriptLogger",
    "RconCommands",
    "load_command_list",
    "StatusParser",
    "OutputParser",
    "SessionConfig",
    "ConfigValidationError",
    "RconError",
    "MalformedFrame",
    "InvalidStatusPayload",
    "UnparseablePlayerLine",
    "LogWriteFailure",
]
