"""Tests for random playouts."""

import logging

import pytest
from tsuro_engine.core import DragonTile
from tsuro_engine.sim import RandomPlayout, summarize


def test_play_game_finishes():
    playout = RandomPlayout(num_players=3, seed=11)
    board, result = playout.play()

    assert result.tiles_placed == board.tiles_placed
    assert 1 <= result.tiles_placed <= 36
    assert sorted(result.exited + result.survivors) == sorted(board.stones)
    assert result.longest_route >= 2


def test_game_ends_with_no_waiting_stone():
    """With more tiles than cells, a game ends only when no stone is waiting."""
    tile_lines = ["05 12 34 67", "01 23 45 67", "04 15 26 37"] * 5
    playout = RandomPlayout(size=3, num_players=4, tile_lines=tile_lines)

    for seed in range(20):
        board, result = playout.play(seed)

        waiting = [board.waiting_cell(stone.color) for stone in board.active_stones()]
        assert all(cell is None for cell in waiting)
        assert result.dragon_drawn is False


def test_dragon_never_placed():
    """Drawing the dragon ends the game without putting it on the grid."""
    tile_lines = ["01 23 45 67"] * 4
    playout = RandomPlayout(size=6, num_players=8, tile_lines=tile_lines)

    for seed in range(50):
        board, result = playout.play(seed)

        assert result.tiles_placed <= 4
        assert not any(
            isinstance(tile, DragonTile) for row in board.grid for tile in row
        )
        if result.dragon_drawn:
            assert result.tiles_placed == 4


def test_game_summary_logged(caplog):
    playout = RandomPlayout(num_players=2)

    with caplog.at_level(logging.INFO, logger="tsuro_engine.sim.random_play"):
        result = playout.play_game(seed=42)

    assert f"Game 42: {result.tiles_placed} tiles" in caplog.text


def test_same_seed_same_game():
    a = RandomPlayout(num_players=2).play_game(seed=1234)
    b = RandomPlayout(num_players=2).play_game(seed=1234)

    assert a.final_positions == b.final_positions
    assert a.tiles_placed == b.tiles_placed


def test_small_board_custom_tiles():
    tile_lines = ["05 12 34 67"] * 20
    playout = RandomPlayout(size=3, num_players=2, seed=2, tile_lines=tile_lines)

    results = playout.run(10, progress=False)

    assert len(results) == 10
    assert playout.games_played == 10
    assert all(r.tiles_placed <= 9 for r in results)


def test_invalid_player_count():
    with pytest.raises(ValueError):
        RandomPlayout(num_players=0)

    with pytest.raises(ValueError):
        RandomPlayout(num_players=9)


def test_summarize():
    results = RandomPlayout(num_players=2, seed=3).run(5, progress=False)
    summary = summarize(results)

    assert summary["games"] == 5
    assert summary["max_route"] >= 2
    assert 0 <= summary["avg_exited"] <= 2


def test_summarize_empty():
    assert summarize([])["games"] == 0
