"""
pyq3rcon Parsers - Status and console payload parsers
"""

from .status_parser import StatusParser
from .output_parser import OutputParser

__all__ = [
    'StatusParser',
    'OutputParser'
]
