"""
Grid cursor over a rectangular block of cells.

A Block owns an n x m matrix of cells and a single cursor. Queries
(bounds, status, visited, entry/exit, free) are read-only; every change to
cell state goes through Block.move(), which marks the cell being left as
visited and CLEAR before stepping into the neighbor.

Entries are the cells of the left column, exits the cells of the right
column. Row 0 is the top.
"""

from __future__ import annotations

import copy
import logging

from grid_types import (
    DELTAS,
    Cell,
    CellMatrix,
    Direction,
    Position,
    Status,
    StatusReading,
)

logger = logging.getLogger(__name__)


class Block:
    """Mutable cursor over an owned cell matrix."""

    def __init__(self, cells: CellMatrix) -> None:
        if not cells or not cells[0]:
            raise ValueError("A block needs at least one row and one column")
        cols = len(cells[0])
        mismatched = [(i, len(row)) for i, row in enumerate(cells) if len(row) != cols]
        if mismatched:
            raise ValueError(
                f"Inconsistent row lengths in block\n"
                f"  Expected: {cols} columns (from row 0)\n"
                f"  Mismatched rows: {mismatched}"
            )
        self._cells = cells
        self._current: Position | None = None
        self._start: Position | None = None

    def __repr__(self) -> str:
        return (
            f"Block({self.rows}x{self.cols}, start={self._start}, current={self._current})"
        )

    # -------------------- grid --------------------

    @property
    def cells(self) -> CellMatrix:
        return self._cells

    @property
    def rows(self) -> int:
        return len(self._cells)

    @property
    def cols(self) -> int:
        return len(self._cells[0])

    def copy(self) -> Block:
        """Independent block over a deep copy of the cells, with no start set."""
        return Block(copy.deepcopy(self._cells))

    # -------------------- positions --------------------

    @property
    def current(self) -> Position | None:
        return self._current

    @property
    def start(self) -> Position | None:
        return self._start

    @property
    def current_row(self) -> int | None:
        return self._current.row if self._current else None

    @property
    def current_col(self) -> int | None:
        return self._current.col if self._current else None

    @property
    def start_row(self) -> int | None:
        return self._start.row if self._start else None

    @property
    def start_col(self) -> int | None:
        return self._start.col if self._start else None

    @property
    def at_start(self) -> bool:
        return self._start is not None and self._current == self._start

    def set_start(self, row: int, col: int) -> None:
        """
        Set the start (and current) position to (row, col).

        Silently ignored unless (row, col) is an entry; callers that need
        feedback check is_entry() first.
        """
        if self.is_entry(row, col):
            self._start = Position(row, col)
            self._current = self._start

    # -------------------- queries --------------------

    def is_valid(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_status(self, row: int, col: int) -> StatusReading:
        if not self.is_valid(row, col):
            return StatusReading.OUT_OF_BOUNDS
        return StatusReading.of(self._cells[row][col].status)

    def is_visited(self, row: int, col: int) -> bool:
        # Out-of-bounds positions count as not visited
        if not self.is_valid(row, col):
            return False
        return self._cells[row][col].visited

    def is_entry(self, row: int, col: int) -> bool:
        return (
            col == 0
            and 0 <= row < self.rows
            and not self.is_visited(row, col)
            and self.get_status(row, col) is StatusReading.CLEAR
        )

    def is_exit(self, row: int, col: int) -> bool:
        return (
            col == self.cols - 1
            and 0 <= row < self.rows
            and not self.is_visited(row, col)
            and self.get_status(row, col) is StatusReading.CLEAR
        )

    def is_free(self, row: int, col: int) -> bool:
        """True if (row, col) can be occupied. Visited cells may still be free."""
        return self.get_status(row, col) is StatusReading.CLEAR

    def entries(self) -> list[Position]:
        """All current entry positions, top to bottom."""
        return [Position(r, 0) for r in range(self.rows) if self.is_entry(r, 0)]

    def exits(self) -> list[Position]:
        """All current exit positions, top to bottom."""
        last = self.cols - 1
        return [Position(r, last) for r in range(self.rows) if self.is_exit(r, last)]

    def open_direction(self, order: tuple[Direction, ...]) -> Direction | None:
        """
        First direction in order whose neighbor is free and not yet visited.

        Returns None when every neighbor is blocked, out of bounds or visited.
        """
        assert self._current is not None, "cursor has no current position"
        for direction in order:
            target = self._current.step(direction)
            if self.is_free(target.row, target.col) and not self.is_visited(target.row, target.col):
                return direction
        return None

    def direction_to(self, target: Position, order: tuple[Direction, ...]) -> Direction | None:
        """First direction in order whose single step from current lands on target."""
        assert self._current is not None, "cursor has no current position"
        for direction in order:
            if self._current.step(direction) == target and self.is_free(target.row, target.col):
                return direction
        return None

    # -------------------- moves --------------------

    def move(self, direction: Direction) -> bool:
        """
        Step the cursor one cell in direction if that neighbor is free.

        The cell being left is marked visited and CLEAR; the destination is
        untouched. Returns True if the cursor moved.
        """
        assert self._current is not None, "move() called before set_start()"
        dr, dc = DELTAS[direction]
        row, col = self._current.row + dr, self._current.col + dc
        if not self.is_free(row, col):
            return False

        vacated: Cell = self._cells[self._current.row][self._current.col]
        vacated.visited = True
        vacated.status = Status.CLEAR
        logger.debug("move %s: %s -> (%d, %d)", direction.value, self._current, row, col)
        self._current = Position(row, col)
        return True

    def move_left(self) -> None:
        self.move(Direction.W)

    def move_right(self) -> None:
        self.move(Direction.E)

    def move_up(self) -> None:
        self.move(Direction.N)

    def move_down(self) -> None:
        self.move(Direction.S)
