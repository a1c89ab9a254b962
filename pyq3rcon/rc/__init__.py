"""
Remote Console (rcon) support for pyq3rcon

Provides the password-authenticated command channel, the command rate gate
and the per-server transcript log.
"""

from .rc_client import RconClient
from .command_gate import CommandGate
from .transcript import TranscriptLogger
from .rc_commands import RconCommands, load_command_list

__all__ = ['RconClient', 'CommandGate', 'TranscriptLogger', 'RconCommands', 'load_command_list']
