"""
Rcon Commands - Common administrative commands and the command word list
"""

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

AUTO_COMPLETION_FILE_NAME = "commands.txt"


def load_command_list(path: Union[str, Path] = AUTO_COMPLETION_FILE_NAME) -> List[str]:
    """
    Read the auto-completion word list, one command per line.

    Empty lines and repeats are dropped, first-seen order is kept.
    A missing or unreadable file gives an empty list.
    """
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"No command list at {path}: {e}")
        return []

    commands = []
    seen = set()
    for line in text.splitlines():
        command = line.strip()
        if command and command not in seen:
            seen.add(command)
            commands.append(command)
    return commands


class RconCommands:
    """Shortcuts for frequently used console commands

    Each method goes through session.send_command, so the rate gate and the
    transcript apply as for typed commands.
    """

    def __init__(self, session):
        self.session = session

    def execute(self, command: str) -> bool:
        return self.session.send_command(command)

    def status(self) -> bool:
        """Ask for the server's player table"""
        return self.execute("status")

    def serverinfo(self) -> bool:
        """Ask for the server info variables"""
        return self.execute("serverinfo")

    def say(self, message: str) -> bool:
        return self.execute(f"say {message}")

    def kick(self, player: str) -> bool:
        return self.execute(f"kick {player}")

    def map(self, name: str) -> bool:
        return self.execute(f"map {name}")
