"""
Output Parser - Splits console output into colored runs
"""

from typing import Iterator, List, Optional, Tuple

from ..models import Color, ColorRun, Output
from ..protocol import PRINT_HEADER, strip_header, strip_marker

COLOR_ESCAPE = "^"
DIGITS = "0123456789"

# Slot 7 is the console's default foreground, so runs after ^7 carry no color
DEFAULT_COLOR_CODE = 7


def _scan(line: str) -> Iterator[Tuple[str, Optional[int]]]:
    """Yield (text, color code) pieces; code is None before the first escape"""
    code = None
    start = 0
    i = 0
    while i < len(line):
        if line[i] == COLOR_ESCAPE and i + 1 < len(line) and line[i + 1] in DIGITS:
            yield line[start:i], code
            code = int(line[i + 1])
            i += 2
            start = i
        else:
            i += 1
    yield line[start:], code


def _color_for(code: Optional[int]) -> Optional[Color]:
    if code is None or code == DEFAULT_COLOR_CODE:
        return None
    return Color.from_code(code)


class OutputParser:
    """Parser for print payloads"""

    @staticmethod
    def parse(raw: bytes) -> List[Output]:
        """Parse a console payload into one Output per line"""
        payload = strip_marker(raw)
        body = strip_header(payload, PRINT_HEADER)
        if body is None:
            body = payload

        text = body.decode('latin-1')
        if not text:
            return []
        lines = text.split('\n')
        if lines[-1] == "":
            lines.pop()

        return [OutputParser.parse_line(line) for line in lines]

    @staticmethod
    def parse_line(line: str) -> Output:
        runs = [
            ColorRun(text, _color_for(code))
            for text, code in _scan(line)
            if text
        ]
        return Output(runs)

    @staticmethod
    def remove_colors(text: str) -> str:
        """Strip ^N escapes, keeping only the text"""
        return "".join(piece for piece, _ in _scan(text))
