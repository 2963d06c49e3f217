"""
Iterative path search over a Block.

Depth-first search with an explicit path stack. From the current cell the
search advances into the first free, unvisited neighbor (left, right, up,
down); when there is none it pops the stack and steps the cursor back to the
previous path position. It stops at the first exit reached, or when it is
stuck at the start.
"""

from __future__ import annotations

import logging

from block import Block
from grid_types import ITERATIVE_RULES, Path, Position, SearchRules

logger = logging.getLogger(__name__)


def is_effective(
    block: Block, start_row: int, start_col: int, rules: SearchRules = ITERATIVE_RULES
) -> bool:
    """
    Determine whether containment holds from the given entry.

    Returns:
        True if no path leads from (start_row, start_col) to an exit
        (including when the position is not an entry), False on a breach.
    """
    return path_calc(block, start_row, start_col, rules) is None


def path_calc(
    block: Block, start_row: int, start_col: int, rules: SearchRules = ITERATIVE_RULES
) -> Path | None:
    """
    Find a path from an entry to any exit.

    Only one path is returned even when several exist; which one depends on
    the advance order in rules.

    Args:
        block: Block to search. Cell state is mutated as the cursor moves.
        start_row: Row of the entry cell
        start_col: Column of the entry cell (must be 0 to be an entry)
        rules: Direction priorities for advancing and stepping back

    Returns:
        Positions from the entry to an exit inclusive, or None if there is
        no path or the start is not an entry.
    """
    if not block.is_entry(start_row, start_col):
        logger.info("path_calc: (%d, %d) is not an entry", start_row, start_col)
        return None

    block.set_start(start_row, start_col)
    start = Position(start_row, start_col)
    path: Path = [start]

    # Single-column blocks: the entry is its own exit
    if block.is_exit(start_row, start_col):
        return path

    steps = 0
    while True:
        steps += 1
        direction = block.open_direction(rules.advance)
        if direction is not None:
            block.move(direction)
            path.append(block.current)
        else:
            if block.at_start:
                logger.info("path_calc: no path from %s after %d steps", start, steps)
                return None

            # Backtrack: abandon the current cell and step back to the previous one
            path.pop()
            previous = path[-1]
            back = block.direction_to(previous, rules.retreat)
            assert back is not None, f"{previous} is not adjacent to {block.current}"
            block.move(back)

        current = block.current
        if block.is_exit(current.row, current.col):
            logger.info("path_calc: exit %s reached after %d steps", current, steps)
            return path
