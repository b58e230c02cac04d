"""Boundary selection enums.

A year boundary is picked by two coordinates: which edge of the year
(start or end) and which year relative to the input (previous, current,
next).
"""

from __future__ import annotations

from enum import StrEnum


class Edge(StrEnum):
    """Which edge of a year."""

    START = "start"
    END = "end"


class Shift(StrEnum):
    """Which year, relative to the one containing the input."""

    PREVIOUS = "previous"
    CURRENT = "current"
    NEXT = "next"
