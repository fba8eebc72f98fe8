"""
Random playouts.

Drives the board the way a session layer would: stones spawn on
distinct spawn positions, then take turns in round robin. On its turn a
stone draws a tile, rotates it at random and places it on the cell it is
waiting on. A game ends when the deck runs out or no stone is waiting
on an empty cell.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from ..core import TILES_PER_ROW, Board, Deck, DragonTile, Rotation, rotate

logger = logging.getLogger(__name__)

COLORS = ("red", "blue", "green", "yellow", "white", "black", "orange", "purple")


@dataclass
class GameResult:
    """Outcome of one random game."""

    seed: int
    tiles_placed: int
    exited: List[str]
    survivors: List[str]
    longest_route: int  # Positions in the longest single resolution
    collisions: int  # Stone groups sharing a position at the end
    dragon_drawn: bool = False
    final_positions: Dict[str, str] = field(default_factory=dict)


class RandomPlayout:
    """
    Plays random games on a fresh board.

    Each game gets its own seed drawn from the playout's generator, so a
    run is reproducible from the top-level seed.
    """

    def __init__(
        self,
        size: int = TILES_PER_ROW,
        num_players: int = 2,
        seed: Optional[int] = None,
        tile_lines: Optional[List[str]] = None,
    ):
        """
        Initialize playout driver.

        Args:
            size: Board side length
            num_players: Stones per game (at most len(COLORS))
            seed: Seed for the game-seed generator
            tile_lines: Tile descriptions; defaults to the standard tile set
        """
        if not 1 <= num_players <= len(COLORS):
            raise ValueError(f"num_players must be 1-{len(COLORS)}, got {num_players}")

        self.size = size
        self.num_players = num_players
        self.tile_lines = tile_lines
        self.rng = random.Random(seed)

        # Statistics
        self.games_played = 0

    def new_deck(self, seed: int) -> Deck:
        if self.tile_lines is None:
            return Deck.standard(seed=seed)
        return Deck.from_lines(self.tile_lines, seed=seed)

    def setup_board(self, rng: random.Random) -> Board:
        """Empty board with stones on distinct random spawn positions."""
        board = Board(self.size)
        spawns = rng.sample(board.spawns, self.num_players)
        for color, position in zip(COLORS, spawns):
            board.add_stone(color, position)
        return board

    def play_game(self, seed: Optional[int] = None) -> GameResult:
        """Play one game and return only its result."""
        _, result = self.play(seed)
        return result

    def play(self, seed: Optional[int] = None) -> Tuple[Board, GameResult]:
        """
        Play one game to completion.

        Args:
            seed: Game seed; drawn from the playout generator if omitted

        Returns:
            Final board and GameResult for the finished game
        """
        if seed is None:
            seed = self.rng.randrange(2**32)

        rng = random.Random(seed)
        board = self.setup_board(rng)
        deck = self.new_deck(seed)

        longest_route = 1
        dragon_drawn = False
        turn = 0

        while True:
            waiting = [
                (stone.color, board.waiting_cell(stone.color))
                for stone in board.active_stones()
            ]
            waiting = [(color, cell) for color, cell in waiting if cell is not None]
            if not waiting:
                break

            color, (row, col) = waiting[turn % len(waiting)]
            tile = deck.draw_next_tile()
            if tile is None:
                break
            if isinstance(tile, DragonTile):
                # The dragon only marks the end of the deck
                dragon_drawn = True
                break

            tile = rotate(tile, rng.choice(list(Rotation)))
            moved = board.place_tile(row, col, tile)
            for stone in moved:
                longest_route = max(longest_route, len(stone.route))

            logger.debug(f"Game {seed} turn {turn}: {color} placed at ({row},{col})")
            turn += 1

        self.games_played += 1

        result = GameResult(
            seed=seed,
            tiles_placed=board.tiles_placed,
            exited=[s.color for s in board.stones.values() if s.exited],
            survivors=[s.color for s in board.active_stones()],
            longest_route=longest_route,
            collisions=len(board.collisions()),
            dragon_drawn=dragon_drawn,
            final_positions={c: str(s.position) for c, s in board.stones.items()},
        )
        logger.info(
            f"Game {seed}: {result.tiles_placed} tiles, "
            f"{len(result.exited)} exited, {len(result.survivors)} survived"
        )
        return board, result

    def run(self, num_games: int, progress: bool = True) -> List[GameResult]:
        """
        Play several games.

        Args:
            num_games: Number of games
            progress: Show a tqdm progress bar

        Returns:
            Results in play order
        """
        logger.info(
            f"Playing {num_games:,} random games on a {self.size}x{self.size} board "
            f"with {self.num_players} stones"
        )

        results = []
        for _ in tqdm(range(num_games), desc="Games", disable=not progress):
            results.append(self.play_game())

        return results


def summarize(results: List[GameResult]) -> Dict[str, float]:
    """Aggregate statistics over a list of game results."""
    if not results:
        return {
            "games": 0,
            "avg_tiles": 0.0,
            "avg_exited": 0.0,
            "avg_survivors": 0.0,
            "max_route": 0,
            "games_with_collisions": 0,
        }

    games = len(results)
    return {
        "games": games,
        "avg_tiles": sum(r.tiles_placed for r in results) / games,
        "avg_exited": sum(len(r.exited) for r in results) / games,
        "avg_survivors": sum(len(r.survivors) for r in results) / games,
        "max_route": max(r.longest_route for r in results),
        "games_with_collisions": sum(1 for r in results if r.collisions > 0),
    }
