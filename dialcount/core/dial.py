"""
Dial primitives shared by every counting rule.

The dial is a plain int kept in [0, DIAL_SIZE). All arithmetic goes through
normalize()/rotate(); the rules never do their own modulo.
"""

from __future__ import annotations

DIAL_SIZE = 100
START_POSITION = 50


def normalize(value: int) -> int:
    """Map any signed integer into [0, DIAL_SIZE)."""
    return ((value % DIAL_SIZE) + DIAL_SIZE) % DIAL_SIZE


def rotate(position: int, delta: int) -> int:
    """Apply a signed delta to a position and normalize the result."""
    return normalize(position + delta)


def steps_to_zero(position: int, unit: int) -> int:
    """
    Number of unit steps in direction `unit` (+1 / -1) until the dial first
    lands on 0. Starting on 0 means a full turn.
    """
    position = normalize(position)
    if position == 0:
        return DIAL_SIZE
    return DIAL_SIZE - position if unit > 0 else position
