"""
ASCII rendering for blocks.

Provides two rendering approaches:
1. Cell rendering - one character per cell, path cells and cursor highlighted
2. Step rendering - path step numbers overlaid on the block
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from block import Block
from grid_types import Cell, Path, Position, Status

logger = logging.getLogger(__name__)

# Cell characters (same alphabet as grid_parser)
CLEAR_CHAR = "."
MARKED_CHAR = "#"
VISITED_CHAR = "o"
PATH_CHAR = "*"


def _cell_char(cell: Cell) -> str:
    if cell.status is Status.MARKED:
        return MARKED_CHAR
    return VISITED_CHAR if cell.visited else CLEAR_CHAR


def _cell_color(cell: Cell) -> Callable[[str], str]:
    if cell.status is Status.MARKED:
        return chalk.red
    return chalk.blue if cell.visited else (lambda s: s)


def _frame(title: str, body: list[str], inner_width: int) -> list[str]:
    """Wrap body lines in a box with the title centered in the top border."""
    title = f" {title} "
    if len(title) <= inner_width:
        title_start = (inner_width - len(title)) // 2
        top = "┌" + "─" * title_start + title + "─" * (inner_width - title_start - len(title)) + "┐"
    else:
        top = "┌" + "─" * inner_width + "┐"
    lines = [top]
    # Entries on the left edge, exits on the right edge
    lines.extend(">" + line + ">" for line in body)
    lines.append("└" + "─" * inner_width + "┘")
    return lines


def render_block(
    block: Block,
    path: Path | None = None,
    cell_width: int = 3,
    title: str | None = None,
) -> str:
    """
    Render a block as a character grid.

    Args:
        block: The block to render
        path: Optional path to draw with '*'
        cell_width: Characters per cell (default 3)
        title: Optional title for the top border (defaults to the block size)

    Returns:
        Rendered string with ANSI color codes
    """
    on_path = set(path or [])

    body: list[str] = []
    for r_idx, row in enumerate(block.cells):
        parts: list[str] = []
        for c_idx, cell in enumerate(row):
            pos = Position(r_idx, c_idx)
            if pos in on_path:
                char, colorize = PATH_CHAR, chalk.green
            else:
                char, colorize = _cell_char(cell), _cell_color(cell)

            content = char if cell_width == 1 else char.center(cell_width)
            if pos == block.current:
                content = chalk.bgWhite.black(content)
            elif pos == block.start:
                content = chalk.yellow(content)
            else:
                content = colorize(content)
            parts.append(content)
        body.append("".join(parts))

    header = title if title is not None else f"{block.rows}x{block.cols}"
    return "\n".join(_frame(header, body, block.cols * cell_width))


def render_with_steps(block: Block, path: Path, title: str | None = None) -> str:
    """
    Render a block with the step index of each path position overlaid.

    Cells off the path use the render_block() characters. Cell width grows
    with the number of steps so every index fits.
    """
    steps: dict[Position, int] = {pos: i for i, pos in enumerate(path)}
    cell_width = max(3, len(str(len(path) - 1)) + 2) if path else 3
    logger.debug("render_with_steps: %d steps, cell_width=%d", len(path), cell_width)

    body: list[str] = []
    for r_idx, row in enumerate(block.cells):
        parts: list[str] = []
        for c_idx, cell in enumerate(row):
            pos = Position(r_idx, c_idx)
            if pos in steps:
                parts.append(chalk.green(str(steps[pos]).center(cell_width)))
            else:
                parts.append(_cell_color(cell)(_cell_char(cell).center(cell_width)))
        body.append("".join(parts))

    header = title if title is not None else f"{len(path)} steps"
    return "\n".join(_frame(header, body, block.cols * cell_width))
