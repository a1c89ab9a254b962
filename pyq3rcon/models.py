"""
pyq3rcon - Models
Plain value objects for servers, status snapshots and console output.
"""

import html
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .config.validation import validate_host, validate_port

DEFAULT_PORT = 27960


# =============================================================================
# Server
# =============================================================================

@dataclass(frozen=True)
class Server:
    """A game server address. Immutable once a client is built from it."""
    host: str
    port: int = DEFAULT_PORT

    @property
    def address(self) -> Tuple[str, int]:
        """Server address as (host, port) tuple."""
        return (self.host, self.port)

    @classmethod
    def parse(cls, text: str) -> 'Server':
        """
        Parse a "host:port" string, as passed to --connect.

        The port defaults to 27960 when omitted.
        """
        host, sep, port = text.strip().rpartition(':')
        if not sep:
            host, port = port, str(DEFAULT_PORT)
        try:
            port_number = int(port)
        except ValueError:
            port_number = -1
        return cls(validate_host(host), validate_port(port_number))

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


# =============================================================================
# Status
# =============================================================================

@dataclass
class Player:
    """One line of the status player list"""
    score: int
    ping: int
    name: str  # May contain ^N color markup

    @property
    def clean_name(self) -> str:
        """Name with color markup removed"""
        from .parsers.output_parser import OutputParser
        return OutputParser.remove_colors(self.name)


@dataclass
class Status:
    """Parsed getstatus response. Replace wholesale, never update in place."""
    variables: Dict[str, str] = field(default_factory=dict)
    players: List[Player] = field(default_factory=list)

    def get(self, key: str, default: str = "") -> str:
        return self.variables.get(key, default)

    @property
    def hostname(self) -> str:
        from .parsers.output_parser import OutputParser
        return OutputParser.remove_colors(self.get("sv_hostname"))

    @property
    def map_name(self) -> str:
        return self.get("mapname")

    @property
    def game_type(self) -> str:
        return self.get("g_gametype")

    @property
    def game_name(self) -> str:
        return self.get("gamename")

    @property
    def version(self) -> str:
        return self.get("shortversion")

    @property
    def max_clients(self) -> int:
        try:
            return int(self.get("sv_maxclients", "0"))
        except ValueError:
            return 0

    @property
    def player_count(self) -> int:
        return len(self.players)

    def title_summary(self, ping: int = 0) -> str:
        """
        Summary used for window titles, e.g. "q3a 1.32 [3/16] ~ 45 ms".

        The ping suffix is left out when ping is not positive.
        """
        summary = f"{self.game_name} {self.version} [{self.player_count}/{self.get('sv_maxclients')}]"
        if ping > 0:
            summary += f" ~ {ping} ms"
        return summary

    def status_line(self) -> str:
        """Summary used for status bars: "mapname (gametype) - hostname"."""
        return f"{self.map_name} ({self.game_type}) - {self.hostname}"


# =============================================================================
# Console Output
# =============================================================================

class Color(Enum):
    """Console palette, indexed by the digit after the ^ escape"""
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    CYAN = 5
    MAGENTA = 6
    WHITE = 7
    ORANGE = 8
    GREY = 9
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> 'Color':
        """Resolve a palette index; anything outside the table is UNKNOWN."""
        if 0 <= code <= 9:
            return cls(code)
        return cls.UNKNOWN

    @property
    def hex(self) -> str:
        return PALETTE_HEX[self]


PALETTE_HEX = {
    Color.BLACK: "#000000",
    Color.RED: "#ff0000",
    Color.GREEN: "#00ff00",
    Color.YELLOW: "#ffff00",
    Color.BLUE: "#0000ff",
    Color.CYAN: "#00ffff",
    Color.MAGENTA: "#ff00ff",
    Color.WHITE: "#ffffff",
    Color.ORANGE: "#ff8000",
    Color.GREY: "#808080",
    Color.UNKNOWN: "#c0c0c0",
}


@dataclass(frozen=True)
class ColorRun:
    """A stretch of text drawn in one color. color=None means default."""
    text: str
    color: Optional[Color] = None


@dataclass
class Output:
    """One line of console output, split into colored runs"""
    runs: List[ColorRun] = field(default_factory=list)

    def to_plain_text(self) -> str:
        return "".join(run.text for run in self.runs)

    def to_markup(self) -> str:
        """Render runs as HTML, one span per colored run"""
        parts = []
        for run in self.runs:
            if not run.text:
                continue
            text = html.escape(run.text, quote=False)
            if run.color is None:
                parts.append(text)
            else:
                parts.append(f'<span style="color:{run.color.hex}">{text}</span>')
        return "".join(parts)

    def to_html(self) -> str:
        """Markup for a console widget, terminated with a line break"""
        return self.to_markup() + "<br />"

    def __str__(self) -> str:
        return self.to_plain_text()
