"""
Grid parsing utilities.

Provides two ways to build a cell matrix:
1. Concise text format, one character per cell
2. Integer matrices of 0 (CLEAR) / 1 (MARKED), with optional visited flags
"""

from __future__ import annotations

from grid_types import Cell, CellMatrix, Status

__all__ = ["parse_block", "cells_from_matrix", "format_block"]

# Character -> (status, visited)
_CELL_CHARS: dict[str, tuple[Status, bool]] = {
    ".": (Status.CLEAR, False),
    "0": (Status.CLEAR, False),
    "#": (Status.MARKED, False),
    "1": (Status.MARKED, False),
    "o": (Status.CLEAR, True),
    "x": (Status.MARKED, True),
}


def parse_block(definition: str) -> CellMatrix:
    """
    Parse a block from a concise string format.

    Format:
    - Rows separated by | or newlines (blank lines and surrounding
      whitespace are ignored)
    - One character per cell:
      * '.' or '0': CLEAR
      * '#' or '1': MARKED
      * 'o': CLEAR, already visited
      * 'x': MARKED, already visited

    Example:
        parse_block("..#|#..|...")
        Creates a 3x3 block whose top row is CLEAR, CLEAR, MARKED.

    Args:
        definition: Block definition string

    Returns:
        Row-major matrix of fresh Cell objects

    Raises:
        ValueError: If the definition is empty, has an unknown character,
                    or has rows of differing length
    """
    row_strings = [
        row.strip()
        for line in definition.strip().split("\n")
        for row in line.split("|")
        if row.strip()
    ]
    if not row_strings:
        raise ValueError("Empty block definition: at least one row is required")

    rows: CellMatrix = []
    for row_idx, row_str in enumerate(row_strings):
        cells: list[Cell] = []
        for col_idx, char in enumerate(row_str):
            if char not in _CELL_CHARS:
                raise ValueError(
                    f"Invalid character '{char}' in block definition\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters:\n"
                    f"    - '.' or '0': CLEAR cell\n"
                    f"    - '#' or '1': MARKED cell\n"
                    f"    - 'o': CLEAR cell, already visited\n"
                    f"    - 'x': MARKED cell, already visited"
                )
            status, visited = _CELL_CHARS[char]
            cells.append(Cell(status, visited))
        rows.append(cells)

    _check_rectangular(rows, row_strings)
    return rows


def cells_from_matrix(
    matrix: list[list[int]], visited: list[list[bool]] | None = None
) -> CellMatrix:
    """
    Build a cell matrix from 0/1 status values.

    Args:
        matrix: Row-major status values, 0 for CLEAR and 1 for MARKED
        visited: Optional matrix of the same shape giving visited flags

    Returns:
        Row-major matrix of fresh Cell objects

    Raises:
        ValueError: On an empty matrix, a value other than 0/1, ragged rows,
                    or a visited matrix whose shape differs
    """
    if not matrix or not matrix[0]:
        raise ValueError("Empty status matrix: at least one row and column are required")

    rows: CellMatrix = []
    for row_idx, row in enumerate(matrix):
        cells: list[Cell] = []
        for col_idx, value in enumerate(row):
            try:
                status = Status(value)
            except ValueError:
                raise ValueError(
                    f"Invalid status {value!r} at row {row_idx}, column {col_idx}\n"
                    f"  Valid values: 0 (CLEAR), 1 (MARKED)"
                ) from None
            was_visited = False
            if visited is not None:
                try:
                    was_visited = bool(visited[row_idx][col_idx])
                except IndexError:
                    raise ValueError(
                        f"Visited matrix has no entry for row {row_idx}, column {col_idx}"
                    ) from None
            cells.append(Cell(status, was_visited))
        rows.append(cells)

    _check_rectangular(rows, [str(row) for row in matrix])
    return rows


def format_block(cells: CellMatrix) -> str:
    """Format a cell matrix in the concise format accepted by parse_block()."""
    chars = {value: char for char, value in _CELL_CHARS.items() if not char.isdigit()}
    return "|".join(
        "".join(chars[(cell.status, cell.visited)] for cell in row) for row in cells
    )


def _check_rectangular(rows: CellMatrix, row_strings: list[str]) -> None:
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in block\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)
