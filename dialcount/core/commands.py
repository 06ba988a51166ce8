"""
Command model and line parser.

A command line is a direction character followed by a positive base-10
magnitude, e.g. "L68" or "r14". Surrounding whitespace is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import InvalidFormat, InvalidSteps, ParseError


class Direction(Enum):
    """Rotation direction; the value is the sign of a unit step."""
    LEFT = -1
    RIGHT = 1


_DIRECTIONS = {
    "L": Direction.LEFT,
    "l": Direction.LEFT,
    "R": Direction.RIGHT,
    "r": Direction.RIGHT,
}

_MAGNITUDE_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Command:
    direction: Direction
    magnitude: int

    @property
    def unit(self) -> int:
        return self.direction.value

    @property
    def delta(self) -> int:
        return self.direction.value * self.magnitude

    def __str__(self) -> str:
        letter = "L" if self.direction is Direction.LEFT else "R"
        return f"{letter}{self.magnitude}"


def parse_command(line: str, line_no: Optional[int] = None) -> Command:
    """
    Parse one line into a Command.

    Raises:
        InvalidFormat: empty, shorter than 2 chars, or unknown direction.
        ParseError: magnitude is not an unsigned integer.
        InvalidSteps: magnitude is zero.
    """
    s = line.strip()

    if not s:
        raise InvalidFormat("Empty line", line_no=line_no)
    if len(s) < 2:
        raise InvalidFormat("Line too short", line_no=line_no)

    direction = _DIRECTIONS.get(s[0])
    if direction is None:
        raise InvalidFormat(f"Invalid direction: {s[0]}", line_no=line_no)

    rest = s[1:]
    # str.isdigit() also accepts non-ASCII digits, so match explicitly.
    if not _MAGNITUDE_RE.fullmatch(rest):
        raise ParseError(f"invalid digit found in string: {rest!r}", line_no=line_no)

    try:
        magnitude = int(rest)
    except ValueError as e:
        # CPython caps int/str conversion length
        raise ParseError(str(e), line_no=line_no) from None
    if magnitude == 0:
        raise InvalidSteps(line_no=line_no)

    return Command(direction, magnitude)


def _split_lines(lines: Union[str, Iterable[str]]) -> Iterable[str]:
    if isinstance(lines, str):
        return lines.split("\n")
    return lines


def iter_commands(lines: Union[str, Iterable[str]]) -> Iterator[Tuple[int, Command]]:
    """
    Yield (line_no, Command) for every non-blank line, 1-based.

    Whitespace-only lines are skipped. The first malformed line raises.
    """
    for i, raw in enumerate(_split_lines(lines), start=1):
        if not raw.strip():
            continue
        yield i, parse_command(raw, line_no=i)
