"""
Recursive path search over a Block.

Same depth-first traversal as propagation.py, written as one recursive call
per cursor step. Neighbors are tried up, right, down, left; when stuck the
search pops the path and steps back to the previous position, scanning
left, down, right, up for the step that gets there.

Each call handles a single step, so recursion depth grows with the number of
steps taken (at most two per cell). The interpreter recursion limit is raised
for the duration of a search to cover that bound. This relies on Python 3.11+,
where Python-to-Python calls do not consume C stack.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from block import Block
from grid_types import RECURSIVE_RULES, Path, Position, SearchOutcome, SearchRules

logger = logging.getLogger(__name__)

# Frames reserved for callers above the search (test runners, demos)
_FRAME_MARGIN = 200


@contextmanager
def _recursion_headroom(depth: int) -> Iterator[None]:
    """Temporarily raise the recursion limit so depth more frames fit."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(previous + depth + _FRAME_MARGIN)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def _max_steps(block: Block) -> int:
    # Every cell is entered forward at most once and left backward at most once
    return 2 * block.rows * block.cols + 1


def recursive_is_effective(
    block: Block, row: int, col: int, rules: SearchRules = RECURSIVE_RULES
) -> bool:
    """
    Recursively determine whether containment holds from the given entry.

    The start is set on the first call if (row, col) is an entry. The search
    returns False as soon as an exit is reached, and True once it has
    backtracked to the start with no unvisited neighbor left (or when the
    position is not an entry at all).
    """
    trail = _initial_trail(block, None)
    with _recursion_headroom(_max_steps(block)):
        outcome, _ = _descend(block, row, col, trail, rules)
    return outcome is not SearchOutcome.EXIT_REACHED


def recursive_path_calc(
    block: Block,
    row: int,
    col: int,
    path: Path | None = None,
    rules: SearchRules = RECURSIVE_RULES,
) -> Path | None:
    """
    Recursively find a path from an entry to any exit.

    Args:
        block: Block to search. Cell state is mutated as the cursor moves.
        row: Row of the entry cell
        col: Column of the entry cell
        path: Positions already walked when resuming a search on a block
              whose start is set. Not modified; the search works on a copy.
        rules: Direction priorities for advancing and stepping back

    Returns:
        Positions from the entry to an exit inclusive, or None.

    Raises:
        ValueError: If path does not fit the block's start and cursor
    """
    trail = _initial_trail(block, path)
    with _recursion_headroom(_max_steps(block)):
        outcome, trail = _descend(block, row, col, trail, rules)
    if outcome is SearchOutcome.EXIT_REACHED:
        return trail
    return None


def _initial_trail(block: Block, path: Path | None) -> Path:
    """
    Copy of the positions already walked, checked against the block.

    A fresh block takes no walked positions. A started block needs a path
    from its start to its cursor; one still at its start may omit it.
    """
    trail: Path = list(path) if path else []
    if block.start is None:
        if trail:
            raise ValueError(
                "Walked path given for a block with no start:\n"
                f"  path: {trail}"
            )
        return trail

    if not trail and block.at_start:
        trail.append(block.start)
    if not trail or trail[0] != block.start or trail[-1] != block.current:
        raise ValueError(
            f"Walked path does not lead from start to cursor:\n"
            f"  start: {block.start}\n"
            f"  cursor: {block.current}\n"
            f"  path: {trail}"
        )
    return trail


def _descend(
    block: Block, row: int, col: int, trail: Path, rules: SearchRules
) -> tuple[SearchOutcome, Path]:
    """One search step from (row, col). Returns the outcome and the trail."""
    if block.start is None:
        if not block.is_entry(row, col):
            logger.info("recursive search: (%d, %d) is not an entry", row, col)
            return (SearchOutcome.INVALID_ENTRY, trail)
        block.set_start(row, col)
        trail.append(Position(row, col))
    else:
        assert block.current == Position(row, col), (
            f"search resumed at ({row}, {col}) but cursor is at {block.current}"
        )

    if block.is_exit(row, col):
        logger.info("recursive search: exit (%d, %d) reached", row, col)
        return (SearchOutcome.EXIT_REACHED, trail)

    direction = block.open_direction(rules.advance)
    if direction is not None:
        block.move(direction)
        trail.append(block.current)
    else:
        if block.at_start:
            logger.info("recursive search: no path from %s", block.start)
            return (SearchOutcome.EXHAUSTED, trail)

        trail.pop()
        back = block.direction_to(trail[-1], rules.retreat)
        assert back is not None, f"{trail[-1]} is not adjacent to {block.current}"
        block.move(back)

    current = block.current
    return _descend(block, current.row, current.col, trail, rules)
