"""
Demonstration script for the containment grid searches.
"""

import logging
import sys

from ascii_render import render_block, render_with_steps
from block import Block
from containment import SearchStrategy, scan_entries
from grid_parser import parse_block
from propagation import path_calc
from recursive_propagation import recursive_path_calc

SCENARIOS = {
    "A: 1x2, both CLEAR": ("..", 0),
    "B: gap in middle barrier": (".#.|...|.#.", 1),
    "C: solid barrier": (".#.|.#.|.#.", 1),
    "D: entry MARKED": ("#..|...|...", 0),
    "E: two corridors": ("...|##.|...", 0),
    "Wide block": (
        """
        ..#.....
        #.#.###.
        ..#...#.
        .####.#.
        ......#.
        """,
        4,
    ),
}


def demo() -> None:
    """Run both searches over each scenario and print the paths found."""
    for name, (definition, entry_row) in SCENARIOS.items():
        print("=" * 40)
        print(f"{name} (entry row {entry_row})")
        print("=" * 40)
        print(render_block(Block(parse_block(definition))))
        print()

        iterative = Block(parse_block(definition))
        path = path_calc(iterative, entry_row, 0)
        print("Iterative:", path if path is not None else "no path")
        print(render_with_steps(iterative, path) if path else render_block(iterative))
        print()

        recursive = Block(parse_block(definition))
        path = recursive_path_calc(recursive, entry_row, 0)
        print("Recursive:", path if path is not None else "no path")
        print(render_with_steps(recursive, path) if path else render_block(recursive))
        print()

        report = scan_entries(parse_block(definition), SearchStrategy.ITERATIVE)
        verdict = "effective" if report.is_effective else f"breached from rows {report.breaches}"
        print(f"Containment: {verdict}")
        print()


if __name__ == "__main__":
    if "-v" in sys.argv[1:]:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    demo()
