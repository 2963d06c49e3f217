"""
Containment checks across a whole block.

Each search runs on its own Block over a private copy of the cells, so the
caller's matrix is never mutated and entries can be checked independently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from block import Block
from grid_types import CellMatrix, Path, SearchOutcome
from propagation import path_calc
from recursive_propagation import recursive_path_calc

logger = logging.getLogger(__name__)


class SearchStrategy(Enum):
    """Which path search implementation to run."""

    ITERATIVE = "iterative"  # Explicit stack; left, right, up, down
    RECURSIVE = "recursive"  # One call per step; up, right, down, left


@dataclass(frozen=True)
class EntryResult:
    """Outcome of a search from one row of the left column."""

    row: int
    outcome: SearchOutcome
    path: Path | None = None

    @property
    def breached(self) -> bool:
        return self.outcome is SearchOutcome.EXIT_REACHED


@dataclass(frozen=True)
class ContainmentReport:
    """Per-entry results for a block."""

    strategy: SearchStrategy
    results: tuple[EntryResult, ...]

    @property
    def breaches(self) -> list[int]:
        """Entry rows from which an exit can be reached."""
        return [r.row for r in self.results if r.breached]

    @property
    def is_effective(self) -> bool:
        """True if no entry leads to an exit."""
        return not self.breaches


def find_path(
    cells: CellMatrix, entry_row: int, strategy: SearchStrategy = SearchStrategy.ITERATIVE
) -> EntryResult:
    """
    Search from (entry_row, 0) on a private copy of cells.

    Args:
        cells: Cell matrix to inspect (not modified)
        entry_row: Row of the candidate entry in column 0
        strategy: Search implementation to use

    Returns:
        EntryResult with the outcome and, on a breach, the path found
    """
    block = Block(cells).copy()
    if not block.is_entry(entry_row, 0):
        return EntryResult(entry_row, SearchOutcome.INVALID_ENTRY)

    match strategy:
        case SearchStrategy.ITERATIVE:
            path = path_calc(block, entry_row, 0)
        case SearchStrategy.RECURSIVE:
            path = recursive_path_calc(block, entry_row, 0)

    if path is None:
        return EntryResult(entry_row, SearchOutcome.EXHAUSTED)
    return EntryResult(entry_row, SearchOutcome.EXIT_REACHED, path)


def scan_entries(
    cells: CellMatrix, strategy: SearchStrategy = SearchStrategy.ITERATIVE
) -> ContainmentReport:
    """
    Search from every row of the left column.

    Rows that are not entries (MARKED or already visited) are reported as
    INVALID_ENTRY.
    """
    results = tuple(find_path(cells, row, strategy) for row in range(len(cells)))
    report = ContainmentReport(strategy, results)
    logger.info(
        "scan_entries: strategy=%s, entries=%d, breaches=%s",
        strategy.value,
        sum(1 for r in results if r.outcome is not SearchOutcome.INVALID_ENTRY),
        report.breaches,
    )
    return report
