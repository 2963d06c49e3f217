"""
Shared type definitions for the containment grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Cardinal direction for cursor movement."""

    N = "N"  # Up (decreasing row)
    S = "S"  # Down (increasing row)
    E = "E"  # Right (increasing col)
    W = "W"  # Left (decreasing col)


# Direction deltas: (row_delta, col_delta)
DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}


class Status(Enum):
    """Contents of a single cell."""

    CLEAR = 0  # Passable
    MARKED = 1  # Barrier


class StatusReading(Enum):
    """Result of a status query: a cell status, or no cell at all."""

    CLEAR = "clear"
    MARKED = "marked"
    OUT_OF_BOUNDS = "out_of_bounds"

    @classmethod
    def of(cls, status: Status) -> StatusReading:
        return cls.CLEAR if status is Status.CLEAR else cls.MARKED


class SearchOutcome(Enum):
    """Reason why a path search terminated."""

    EXIT_REACHED = "exit_reached"  # Breach: an exit was reached
    EXHAUSTED = "exhausted"  # Backtracked to the start with no options left
    INVALID_ENTRY = "invalid_entry"  # Start position was not an entry


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass
class Cell:
    """A single plot of the grid. Mutated in place by cursor moves."""

    status: Status = Status.CLEAR
    visited: bool = False

    @property
    def is_clear(self) -> bool:
        return self.status is Status.CLEAR


@dataclass(frozen=True)
class Position:
    """A (row, col) position within a grid. Row 0 is the top."""

    row: int
    col: int

    def step(self, direction: Direction) -> Position:
        """Position one cell away in the given direction (may be out of bounds)."""
        dr, dc = DELTAS[direction]
        return Position(self.row + dr, self.col + dc)

    def is_adjacent(self, other: Position) -> bool:
        """True if other is exactly one horizontal or vertical step away."""
        return abs(self.row - other.row) + abs(self.col - other.col) == 1


Path = list[Position]

CellMatrix = list[list[Cell]]


# =============================================================================
# Search Rules
# =============================================================================


@dataclass(frozen=True)
class SearchRules:
    """
    Direction priorities governing a path search.

    advance: order in which neighbors are tried when moving forward
    retreat: order in which directions are scanned when stepping back
             to the previous path position
    """

    advance: tuple[Direction, ...]
    retreat: tuple[Direction, ...]


# Left, right, up, down. Backtracking follows the same order.
ITERATIVE_RULES = SearchRules(
    advance=(Direction.W, Direction.E, Direction.N, Direction.S),
    retreat=(Direction.W, Direction.E, Direction.N, Direction.S),
)

# Up, right, down, left. Backtracking scans in reverse: left, down, right, up.
RECURSIVE_RULES = SearchRules(
    advance=(Direction.N, Direction.E, Direction.S, Direction.W),
    retreat=(Direction.W, Direction.S, Direction.E, Direction.N),
)
