"""
Interactive demo for the containment grid.
Display a block, walk the cursor with keyboard commands, and run searches.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_block, render_with_steps
from block import Block
from grid_parser import parse_block
from grid_types import Direction, Path
from propagation import path_calc
from recursive_propagation import recursive_path_calc


class InteractiveDemo:
    """Interactive demo for cursor moves and path searches."""

    def __init__(self, definition: str) -> None:
        self.definition = definition  # Keep the original layout for resets
        self.block = Block(parse_block(definition))
        self.entry_row = 0
        self.path: Path | None = None
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with block and status."""
        status = Text()
        status.append("Entry row: ", style="bold")
        status.append(f"{self.entry_row}\n")
        status.append("Cursor: ", style="bold")
        status.append(f"{self.block.current}\n")
        status.append("Start: ", style="bold")
        status.append(f"{self.block.start}\n\n")

        if self.path:
            grid_text = render_with_steps(self.block, self.path)
        else:
            grid_text = render_block(self.block)
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  J/K - Select entry row\n")
        status.append("  E - Set start at entry row\n")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  I - Iterative search from entry row\n")
        status.append("  R - Recursive search from entry row\n")
        status.append("  X - Reset block\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Containment Grid Explorer", border_style="green", width=80)

    def select_entry(self, delta: int) -> None:
        self.entry_row = (self.entry_row + delta) % self.block.rows
        self.status_message = f"Entry row {self.entry_row}"

    def set_start(self) -> None:
        if not self.block.is_entry(self.entry_row, 0):
            self.status_message = f"✗ ({self.entry_row}, 0) is not an entry"
            return
        self.block.set_start(self.entry_row, 0)
        self.status_message = f"✓ Start set at ({self.entry_row}, 0)"

    def attempt_move(self, direction: Direction) -> None:
        if self.block.current is None:
            self.status_message = "✗ Set a start first (E)"
            return
        if self.block.move(direction):
            self.status_message = f"✓ Moved {direction.value} to {self.block.current}"
        else:
            self.status_message = f"✗ Move {direction.value} blocked"

    def run_search(self, recursive: bool) -> None:
        """Run a search from the selected entry row on a fresh block."""
        self.block = Block(parse_block(self.definition))
        if recursive:
            self.path = recursive_path_calc(self.block, self.entry_row, 0)
        else:
            self.path = path_calc(self.block, self.entry_row, 0)
        name = "Recursive" if recursive else "Iterative"
        if self.path is None:
            self.status_message = f"{name}: no path from row {self.entry_row} (effective)"
        else:
            self.status_message = f"{name}: breach in {len(self.path)} cells, exit {self.path[-1]}"

    def reset_block(self) -> None:
        """Reset the block to its original state."""
        self.block = Block(parse_block(self.definition))
        self.path = None
        self.status_message = "Block reset to original state"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey().lower()

                    if key == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == 'x':
                        self.reset_block()
                    elif key == 'j':
                        self.select_entry(1)
                    elif key == 'k':
                        self.select_entry(-1)
                    elif key == 'e':
                        self.set_start()
                    elif key == 'i':
                        self.run_search(recursive=False)
                    elif key == 'r':
                        self.run_search(recursive=True)
                    elif key == 'w':
                        self.attempt_move(Direction.N)
                    elif key == 's':
                        self.attempt_move(Direction.S)
                    elif key == 'a':
                        self.attempt_move(Direction.W)
                    elif key == 'd':
                        self.attempt_move(Direction.E)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    maze="""
        ..#.....
        #.#.###.
        ..#...#.
        .####.#.
        ......#.
    """,
    barrier=".#..|.#..|.#..|.#..",
    corridor="....|####|....",
)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render the initial state and both searches
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering initial state')
        print()

        definition = LAYOUTS['maze']
        block = Block(parse_block(definition))
        print(render_block(block))
        for search in (path_calc, recursive_path_calc):
            block = Block(parse_block(definition))
            path = search(block, 4, 0)
            print(render_with_steps(block, path) if path else render_block(block))
    else:
        InteractiveDemo(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'maze']).run()
