"""Low-level parser for lines of the MPD protocol."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """A name-value pair sent by the server."""

    name: str
    value: str


class ParserResult(enum.Enum):
    """What kind of line was fed into the parser."""

    MALFORMED = enum.auto()
    SUCCESS = enum.auto()
    ERROR = enum.auto()
    PAIR = enum.auto()


_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")


def _parse_number(text: str, pos: int, *, signed: bool) -> tuple[int, int]:
    """Parse an integer at *pos*; return (value, end). No digits: (0, pos)."""
    match = _NUMBER.match(text, pos)
    if match is None:
        return 0, pos
    sign, digits = match.groups()
    value = int(digits)
    if sign == "-":
        value = -value if signed else (-value) % (1 << 32)
    return value, match.end()


class Parser:
    """Feed it response lines; it tells what each line is and holds its parts."""

    def __init__(self) -> None:
        self.result = ParserResult.MALFORMED
        self._discrete = False
        self._server: int | None = None
        self._at = 0
        self._message: str | None = None
        self._pair: Pair | None = None

    def feed(self, line: str) -> ParserResult:
        """Parse one line (without its newline) and return its kind."""
        self.result = self._parse(line)
        return self.result

    def _parse(self, line: str) -> ParserResult:
        if line == "OK":
            self._discrete = False
            return ParserResult.SUCCESS
        if line == "list_OK":
            self._discrete = True
            return ParserResult.SUCCESS
        if line.startswith("ACK"):
            return self._parse_ack(line)

        colon = line.find(":")
        if colon < 0 or line[colon + 1 : colon + 2] != " ":
            return ParserResult.MALFORMED
        self._pair = Pair(line[:colon], line[colon + 2 :])
        return ParserResult.PAIR

    def _parse_ack(self, line: str) -> ParserResult:
        self._server = None
        self._at = 0
        self._message = None

        bracket = line.find("[", 3)
        if bracket < 0:
            return ParserResult.ERROR

        self._server, pos = _parse_number(line, bracket + 1, signed=True)
        if line[pos : pos + 1] == "@":
            self._at, pos = _parse_number(line, pos + 1, signed=False)

        close = line.find("]", pos)
        if close < 0:
            return ParserResult.MALFORMED

        pos = close + 1
        if line.find("{", pos) >= 0:
            brace = line.find("}", pos)
            if brace >= 0:
                pos = brace + 1

        rest = line[pos:].lstrip(" ")
        if rest:
            self._message = rest
        return ParserResult.ERROR

    def _require(self, expected: ParserResult) -> None:
        if self.result is not expected:
            raise RuntimeError(
                f"last line was {self.result.name}, not {expected.name}"
            )

    @property
    def discrete(self) -> bool:
        """After SUCCESS: True for "list_OK", False for "OK"."""
        self._require(ParserResult.SUCCESS)
        return self._discrete

    @property
    def server_error(self) -> int | None:
        """After ERROR: the server's ACK code, or None if it sent none."""
        self._require(ParserResult.ERROR)
        return self._server

    @property
    def at(self) -> int:
        """After ERROR: the index of the failed command in a command list."""
        self._require(ParserResult.ERROR)
        return self._at

    @property
    def message(self) -> str | None:
        """After ERROR: the server's error message, if any."""
        self._require(ParserResult.ERROR)
        return self._message

    @property
    def pair(self) -> Pair:
        """After PAIR: the parsed pair."""
        self._require(ParserResult.PAIR)
        assert self._pair is not None
        return self._pair

    @property
    def name(self) -> str:
        """After PAIR: the pair's name."""
        return self.pair.name

    @property
    def value(self) -> str:
        """After PAIR: the pair's value."""
        return self.pair.value