"""
Transcript Logger - Per-server plain-text log of commands and console output
"""

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Union

from ..errors import LogWriteFailure
from ..models import Output, Server

logger = logging.getLogger(__name__)

LOG_FILE_FORMAT = "log_{host}_{port}.log"

# Day of month is not zero-padded: "Fri Oct 9 14:03:00 2026"
TIMESTAMP_FORMAT = "{now:%a %b} {now.day} {now:%H:%M:%S %Y}"


def format_timestamp(now: datetime) -> str:
    return TIMESTAMP_FORMAT.format(now=now)


class TranscriptLogger:
    """Append-only transcript, one file per server

    The file is opened and closed on every append so nothing is held open
    between writes. When disabled, no file is ever created or touched.
    """

    def __init__(self, server: Server, enabled: bool = True,
                 log_dir: Union[str, Path] = ".", file_format: str = LOG_FILE_FORMAT):
        self.server = server
        self.enabled = enabled
        self.path = Path(log_dir) / file_format.format(host=server.host, port=server.port)
        self._lock = threading.Lock()

    def append(self, line: str) -> bool:
        """Append text as-is. Returns True if it reached the file."""
        if not self.enabled:
            return False
        try:
            self._write(line)
            return True
        except LogWriteFailure as e:
            logger.warning(str(e))
            return False

    def log_command(self, command: str) -> bool:
        """Record an outgoing command: "<timestamp> > <command>" and a blank line"""
        timestamp = format_timestamp(datetime.now())
        return self.append(f"{timestamp} > {command}\n\n")

    def log_output(self, output: Output) -> bool:
        """Record one console line as plain text"""
        return self.append(output.to_plain_text() + "\n")

    def _write(self, line: str):
        with self._lock:
            try:
                with open(self.path, "a", encoding="utf-8") as f:
                    f.write(line)
            except OSError as e:
                raise LogWriteFailure(str(self.path), e.strerror or str(e)) from e
