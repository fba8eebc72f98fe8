"""
Rich-based board rendering.

Draws the grid as a table: each placed tile shows its path pairs, a
DragonTile shows a marker, and stones are listed in the cell they stand
on with their connector index.
"""

import logging
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table

from ..core import Board, DragonTile, PathTile

console = Console()
logger = logging.getLogger(__name__)

# rich style per stone color; unknown colors print unstyled
STONE_STYLES: Dict[str, str] = {
    "red": "bold red",
    "blue": "bold blue",
    "green": "bold green",
    "yellow": "bold yellow",
    "white": "bold white",
    "black": "bold bright_black",
    "orange": "bold dark_orange",
    "purple": "bold magenta",
}


class BoardDisplay:
    """Renders boards and simulation summaries to the console."""

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize board display.

        Args:
            output: Console to print to; defaults to the shared module console
        """
        self.console = output or console

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        self.console.print(f"[green]✓[/green] {message}")

    def log_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow]  {message}")

    def show_header(self, title: str, size: int, players: int, seed: Optional[int]):
        """Show run header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(f"Board: {size}x{size}")
        self.console.print(f"Stones: {players}")
        self.console.print(f"Seed: {seed if seed is not None else 'random'}")
        self.console.print()

    def cell_text(self, board: Board, row: int, col: int) -> str:
        """Markup for one grid cell."""
        tile = board.tile_at(row, col)
        lines: List[str] = []

        if tile is None:
            lines.append("[dim]·[/dim]")
        elif isinstance(tile, DragonTile):
            lines.append("[bold red]DRAGON[/bold red]")
        elif isinstance(tile, PathTile):
            pairs = [f"{a}{b}" for a, b in tile.pairs()]
            lines.append(" ".join(pairs[:2]))
            lines.append(" ".join(pairs[2:]))

        for stone in board.stones.values():
            if stone.position.cell != (row, col):
                continue
            style = STONE_STYLES.get(stone.color, "bold")
            marker = "x" if stone.exited else "●"
            lines.append(f"[{style}]{marker}{stone.color}:{stone.position.index}[/{style}]")

        return "\n".join(lines)

    def board_table(self, board: Board) -> Table:
        """Create a table showing the grid."""
        table = Table(show_header=True, show_lines=True, header_style="cyan")
        table.add_column("", style="cyan", justify="right")
        for col in range(board.size):
            table.add_column(str(col), justify="center", min_width=7)

        for row in range(board.size):
            table.add_row(
                str(row), *(self.cell_text(board, row, col) for col in range(board.size))
            )

        return table

    def show_board(self, board: Board):
        self.console.print(self.board_table(board))
        self.console.print(
            f"[dim]{board.tiles_placed}/{board.size * board.size} tiles placed | "
            f"{len(board.spawns)} spawn points[/dim]"
        )

    def show_stones(self, board: Board):
        """Show a table of stone positions and status."""
        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("Stone", style="cyan")
        table.add_column("Position", style="white")
        table.add_column("Status")
        table.add_column("Last route", style="dim")

        for stone in board.stones.values():
            status = "[red]exited[/red]" if stone.exited else "[green]on board[/green]"
            route = " → ".join(str(p) for p in stone.route)
            table.add_row(stone.color, str(stone.position), status, route)

        self.console.print(table)

        for group in board.collisions():
            self.log_warning(f"Stones share a position: {', '.join(group)}")

    def show_summary(self, summary: Dict[str, float]):
        """Show simulation summary table."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Games", f"{summary['games']:,}")
        table.add_row("Avg tiles placed", f"{summary['avg_tiles']:.1f}")
        table.add_row("Avg stones exited", f"{summary['avg_exited']:.2f}")
        table.add_row("Avg survivors", f"{summary['avg_survivors']:.2f}")
        table.add_row("Longest route", f"[bold]{summary['max_route']}[/bold]")
        table.add_row("Games with collisions", f"{summary['games_with_collisions']:,}")

        self.console.print(table)


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
