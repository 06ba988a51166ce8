# dialcount/__init__.py
"""
dialcount public API surface.

A dial with positions 0..99 starts at 50 and is turned by commands like
"L68" / "R14". This package counts how often it lands on 0:

    - Commands: Direction, Command, parse_command, iter_commands
    - Dial: DIAL_SIZE, START_POSITION, normalize, rotate
    - Rules: count_coarse, count_fine, zero_hits, get_rule,
             list_rule_names, run_rule
    - Errors: RotationError, InvalidFormat, ParseError, InvalidSteps, ErrorKind
    - Trace: TraceEntry, trace_run
    - Run seam: run_counts, run_counts_json
"""

from __future__ import annotations

from .core.commands import Command, Direction, iter_commands, parse_command
from .core.dial import DIAL_SIZE, START_POSITION, normalize, rotate
from .core.errors import ErrorKind, InvalidFormat, InvalidSteps, ParseError, RotationError
from .rules import (
    count_coarse,
    count_fine,
    get_rule,
    list_rule_names,
    run_rule,
    zero_hits,
)
from .trace import TraceEntry, trace_run
from .count_run import run_counts, run_counts_json


__all__ = [
    # commands
    "Command",
    "Direction",
    "parse_command",
    "iter_commands",

    # dial
    "DIAL_SIZE",
    "START_POSITION",
    "normalize",
    "rotate",

    # errors
    "ErrorKind",
    "RotationError",
    "InvalidFormat",
    "ParseError",
    "InvalidSteps",

    # rules
    "count_coarse",
    "count_fine",
    "zero_hits",
    "get_rule",
    "list_rule_names",
    "run_rule",

    # trace
    "TraceEntry",
    "trace_run",

    # run seam
    "run_counts",
    "run_counts_json",
]
