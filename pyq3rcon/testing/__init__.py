"""
Test helpers for pyq3rcon
"""

from .mock_server import MockQ3Server, ServerScenario, ServerState

__all__ = ['MockQ3Server', 'ServerScenario', 'ServerState']
