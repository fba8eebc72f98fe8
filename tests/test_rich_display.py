"""Tests for board rendering."""

from rich.console import Console

from tsuro_engine.core import Board, DragonTile, PathTile, Position
from tsuro_engine.utils import BoardDisplay


def make_display():
    console = Console(record=True, width=120, color_system=None)
    return BoardDisplay(output=console), console


def test_cell_text():
    display, _ = make_display()
    board = Board(size=3)
    board.add_stone("red", Position(0, 0, 5))
    board.place_tile(0, 0, PathTile.from_pairs([(0, 5), (1, 2), (3, 4), (6, 7)]))
    board.place_tile(2, 2, DragonTile())

    assert display.cell_text(board, 0, 0) == "05 12\n34 67\n[bold red]●red:0[/bold red]"
    assert "DRAGON" in display.cell_text(board, 2, 2)
    assert display.cell_text(board, 1, 1) == "[dim]·[/dim]"


def test_show_board_and_stones():
    display, console = make_display()
    board = Board(size=3)
    board.add_stone("blue", Position(0, 0, 7))
    board.place_tile(0, 0, PathTile.from_pairs([(0, 5), (1, 2), (3, 4), (6, 7)]))

    display.show_board(board)
    display.show_stones(board)
    output = console.export_text()

    assert "1/9 tiles placed" in output
    assert "24 spawn points" in output
    assert "blue" in output
    assert "exited" in output


def test_show_summary():
    display, console = make_display()
    display.show_summary(
        {
            "games": 10,
            "avg_tiles": 12.5,
            "avg_exited": 1.2,
            "avg_survivors": 0.8,
            "max_route": 9,
            "games_with_collisions": 1,
        }
    )
    output = console.export_text()

    assert "Avg tiles placed" in output
    assert "12.5" in output


def test_log_info():
    display, console = make_display()
    display.log_info("Game seed 7: 12 tiles placed")

    assert "Game seed 7: 12 tiles placed" in console.export_text()
