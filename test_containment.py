"""
Tests for containment scans across all entries.
"""

import pytest

from block import Block
from containment import (
    ContainmentReport,
    EntryResult,
    SearchStrategy,
    find_path,
    scan_entries,
)
from grid_parser import format_block, parse_block
from grid_types import Position, SearchOutcome
from test_flips import random_cells, reachable_exit


class TestFindPath:
    """Tests for find_path()."""

    @pytest.mark.parametrize("strategy", list(SearchStrategy))
    def test_breach(self, strategy: SearchStrategy) -> None:
        """Test a breach reports the path found."""
        result = find_path(parse_block(".#.|...|.#."), 1, strategy)
        assert result.outcome is SearchOutcome.EXIT_REACHED
        assert result.breached
        assert result.path == [Position(1, 0), Position(1, 1), Position(1, 2)]

    @pytest.mark.parametrize("strategy", list(SearchStrategy))
    def test_exhausted(self, strategy: SearchStrategy) -> None:
        """Test a contained entry reports no path."""
        result = find_path(parse_block(".#.|.#."), 0, strategy)
        assert result == EntryResult(0, SearchOutcome.EXHAUSTED)
        assert not result.breached

    @pytest.mark.parametrize("strategy", list(SearchStrategy))
    def test_invalid_entry(self, strategy: SearchStrategy) -> None:
        """Test a MARKED or out-of-range row is not searched."""
        cells = parse_block("#..|...")
        assert find_path(cells, 0, strategy).outcome is SearchOutcome.INVALID_ENTRY
        assert find_path(cells, 5, strategy).outcome is SearchOutcome.INVALID_ENTRY

    def test_cells_not_mutated(self) -> None:
        """Test the caller's cells are left as they were."""
        cells = parse_block("...|.#.|...")
        before = format_block(cells)
        find_path(cells, 1, SearchStrategy.ITERATIVE)
        find_path(cells, 1, SearchStrategy.RECURSIVE)
        assert format_block(cells) == before

    def test_searches_run_on_block_copy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test every search gets its cursor from Block.copy()."""
        copies: list[Block] = []
        plain_copy = Block.copy

        def tracking_copy(self: Block) -> Block:
            clone = plain_copy(self)
            copies.append(clone)
            return clone

        monkeypatch.setattr(Block, "copy", tracking_copy)
        cells = parse_block(".#.|...")
        result = find_path(cells, 1, SearchStrategy.RECURSIVE)
        assert len(copies) == 1
        assert copies[0].start == Position(1, 0)
        assert copies[0].cells is not cells
        assert result.breached


class TestScanEntries:
    """Tests for scan_entries()."""

    def test_effective_block(self) -> None:
        """Test a solid barrier is effective from every entry."""
        report = scan_entries(parse_block(".#.|.#.|.#."))
        assert report.is_effective
        assert report.breaches == []
        assert [r.outcome for r in report.results] == [SearchOutcome.EXHAUSTED] * 3

    def test_breached_block(self) -> None:
        """Test every entry connected to the gap is a breach."""
        report = scan_entries(parse_block(".#.|...|##."), SearchStrategy.RECURSIVE)
        assert not report.is_effective
        assert report.breaches == [0, 1]
        assert report.strategy is SearchStrategy.RECURSIVE
        assert report.results[2].outcome is SearchOutcome.INVALID_ENTRY

    def test_entries_searched_independently(self) -> None:
        """Test one search's visited cells do not block the next entry."""
        report = scan_entries(parse_block("...|..."))
        assert report.breaches == [0, 1]

    def test_report_type(self) -> None:
        """Test one result per row, in row order."""
        report = scan_entries(parse_block(".|#|."))
        assert isinstance(report, ContainmentReport)
        assert [r.row for r in report.results] == [0, 1, 2]
        assert report.breaches == [0, 2]

    @pytest.mark.parametrize("seed", range(20))
    def test_strategies_agree(self, seed: int) -> None:
        """Test both strategies report the same breached rows as the oracle."""
        cells = random_cells(seed, 7, 7, density=0.4)
        expected = [row for row in range(7) if reachable_exit(cells, row)]
        assert scan_entries(cells, SearchStrategy.ITERATIVE).breaches == expected
        assert scan_entries(cells, SearchStrategy.RECURSIVE).breaches == expected
