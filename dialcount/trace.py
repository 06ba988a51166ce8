"""
Per-command trace of a dial run.

Each entry records where the dial started and ended for one command and how
many hits that command contributed under each rule. Summing `coarse_hit`
gives count_coarse(); summing `fine_hits` gives count_fine().
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from .core.commands import iter_commands
from .core.dial import START_POSITION, normalize, rotate
from .rules import Lines, zero_hits


@dataclass(frozen=True, slots=True)
class TraceEntry:
    line_no: int
    command: str
    start: int
    end: int
    coarse_hit: bool
    fine_hits: int

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def trace_run(lines: Lines, start: int = START_POSITION) -> List[TraceEntry]:
    position = normalize(start)
    out: List[TraceEntry] = []
    for line_no, command in iter_commands(lines):
        end = rotate(position, command.delta)
        out.append(
            TraceEntry(
                line_no=line_no,
                command=str(command),
                start=position,
                end=end,
                coarse_hit=end == 0,
                fine_hits=zero_hits(position, command),
            )
        )
        position = end
    return out


def format_entry(entry: TraceEntry) -> str:
    """Human-readable trace line, e.g. 'line 1: R50 50 -> 0 (coarse hit, fine +1)'."""
    tags = []
    if entry.coarse_hit:
        tags.append("coarse hit")
    if entry.fine_hits:
        tags.append(f"fine +{entry.fine_hits}")
    suffix = f" ({', '.join(tags)})" if tags else ""
    return f"line {entry.line_no}: {entry.command} {entry.start} -> {entry.end}{suffix}"
