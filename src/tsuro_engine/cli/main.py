"""
Main CLI for the Tsuro engine.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..core import TILES_PER_ROW, Deck, standard_tiles, format_tile
from ..sim import RandomPlayout, summarize
from ..utils.rich_display import BoardDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def read_tile_lines(tiles_file):
    """Tile lines from --tiles-file, or None for the standard set."""
    if tiles_file is None:
        return None
    return Path(tiles_file).read_text().splitlines()


def demo_command(args):
    """Play one random game and show the final board."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = BoardDisplay()

    display.show_header("Tsuro - random game", args.size, args.players, args.seed)

    playout = RandomPlayout(
        size=args.size,
        num_players=args.players,
        seed=args.seed,
        tile_lines=read_tile_lines(args.tiles_file),
    )

    board, result = playout.play()
    logger.debug(f"Final board:\n{board}")
    display.log_info(f"Game seed {result.seed}: {result.tiles_placed} tiles placed")
    if result.dragon_drawn:
        display.log_info("Dragon tile drawn: deck exhausted")

    display.show_board(board)
    display.show_stones(board)

    if result.survivors:
        display.log_success(f"Still on the board: {', '.join(result.survivors)}")
    else:
        display.log_warning("Every stone left the board")


def simulate_command(args):
    """Run many random games and print a summary."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)
    display = BoardDisplay()

    display.show_header(
        f"Tsuro - {args.games:,} random games", args.size, args.players, args.seed
    )

    playout = RandomPlayout(
        size=args.size,
        num_players=args.players,
        seed=args.seed,
        tile_lines=read_tile_lines(args.tiles_file),
    )
    results = playout.run(args.games, progress=not args.no_progress)

    summary = summarize(results)
    logger.info(f"Finished {summary['games']:,} games")
    display.show_summary(summary)


def tiles_command(args):
    """Print the standard tile set, one tile per line."""
    setup_logging(args.log_level)

    tiles = standard_tiles()
    for tile in tiles:
        print(format_tile(tile))

    if args.check:
        deck = Deck.standard(seed=0)
        logging.getLogger(__name__).info(
            f"{len(tiles)} distinct tiles, deck of {len(deck)} with dragon"
        )


def add_game_arguments(parser):
    parser.add_argument(
        "--size", type=int, default=TILES_PER_ROW, help="Board side length"
    )
    parser.add_argument(
        "--players", type=int, default=2, help="Number of stones"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for reproducible runs"
    )
    parser.add_argument(
        "--tiles-file",
        default=None,
        help="Tile description file (one tile per line, 8 digits); defaults to the standard set",
    )


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Tsuro board engine")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Play one random game and show the board")
    add_game_arguments(demo_parser)
    demo_parser.set_defaults(func=demo_command)

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Run many random games")
    add_game_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=1000, help="Number of games to play"
    )
    simulate_parser.add_argument(
        "--no-progress", action="store_true", help="Hide the progress bar"
    )
    simulate_parser.set_defaults(func=simulate_command)

    # Tiles command
    tiles_parser = subparsers.add_parser("tiles", help="List the standard tile set")
    tiles_parser.add_argument(
        "--check", action="store_true", help="Also build a deck and report its size"
    )
    tiles_parser.set_defaults(func=tiles_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
