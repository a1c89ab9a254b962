"""
Configuration system for pyq3rcon
"""

from .client_config import SessionConfig
from .validation import ConfigValidationError

__all__ = ['SessionConfig', 'ConfigValidationError']
