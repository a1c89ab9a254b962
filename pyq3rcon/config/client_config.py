"""
Session Configuration - Settings consumed by the query/rcon session
"""

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Union

from .validation import (
    ConfigValidationError,
    parse_bool,
    validate_interval,
)

logger = logging.getLogger(__name__)

PREFERENCES_FILE_NAME = "preferences.ini"


@dataclass
class SessionConfig:
    """Session configuration settings"""

    # Transcript
    logging_enabled: bool = True
    log_dir: str = "."
    log_file_format: str = "log_{host}_{port}.log"

    # Timing (milliseconds)
    getstatus_interval: int = 2000
    min_command_interval: int = 1000

    # Socket
    recv_buffer_size: int = 65536

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'logging_enabled': self.logging_enabled,
            'log_dir': self.log_dir,
            'log_file_format': self.log_file_format,
            'getstatus_interval': self.getstatus_interval,
            'min_command_interval': self.min_command_interval,
            'recv_buffer_size': self.recv_buffer_size
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SessionConfig':
        """Create from dictionary"""
        return cls(**data)

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def validate(self) -> 'SessionConfig':
        """Check every field, raising ConfigValidationError on the first bad one"""
        validate_interval("getstatus_interval", self.getstatus_interval)
        validate_interval("min_command_interval", self.min_command_interval)
        if self.getstatus_interval == 0:
            raise ConfigValidationError("getstatus_interval must be greater than 0")
        if "{host}" not in self.log_file_format or "{port}" not in self.log_file_format:
            raise ConfigValidationError("log_file_format must contain {host} and {port}")
        if self.recv_buffer_size <= 0:
            raise ConfigValidationError("recv_buffer_size must be greater than 0")
        return self

    @classmethod
    def from_preferences(cls, path: Union[str, Path] = PREFERENCES_FILE_NAME) -> 'SessionConfig':
        """
        Load settings from an INI preferences file.

        Keys may sit in a [General] section or before any section header.
        A missing file gives the defaults. Only keys this library reads are
        looked at; the file is never written.
        """
        config = cls()
        path = Path(path)
        if not path.exists():
            logger.debug(f"No preferences at {path}, using defaults")
            return config

        parser = configparser.ConfigParser(interpolation=None, strict=False)
        text = path.read_text(encoding="utf-8", errors="replace")
        parser.read_string("[DEFAULT]\n" + text, source=str(path))
        section = parser["General"] if parser.has_section("General") else parser.defaults()

        if "logging_enabled" in section:
            config.logging_enabled = parse_bool(section["logging_enabled"])
        if "getstatus_interval" in section:
            try:
                config.getstatus_interval = int(section["getstatus_interval"])
            except ValueError:
                raise ConfigValidationError(
                    f"getstatus_interval must be an integer, got {section['getstatus_interval']!r}"
                )
        return config.validate()
