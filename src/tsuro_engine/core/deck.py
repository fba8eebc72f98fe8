"""
Tile deck.

Tiles are described one per line as 8 digits read in pairs, e.g.
"01 25 34 67" pairs 0-1, 2-5, 3-4 and 6-7. The deck is shuffled and a
DragonTile is put at the bottom so it is the last tile drawn.
"""

import logging
import random
from pathlib import Path as FilePath
from typing import Iterable, List, Optional, Set, Tuple

from .geometry import CONNECTORS_PER_TILE
from .tile import DragonTile, PathTile, Rotation, Tile, parse_tile, rotate

logger = logging.getLogger(__name__)


def _matchings(indices: Tuple[int, ...]) -> List[List[Tuple[int, int]]]:
    """All perfect matchings of indices, as lists of ascending pairs."""
    if not indices:
        return [[]]

    first = indices[0]
    result = []
    for partner in indices[1:]:
        rest = tuple(i for i in indices if i not in (first, partner))
        for matching in _matchings(rest):
            result.append([(first, partner)] + matching)
    return result


def canonical_form(tile: PathTile) -> PathTile:
    """Smallest of the 4 rotations of a tile, used to compare tiles up to rotation."""
    rotations = [rotate(tile, rotation) for rotation in Rotation]
    return min(rotations, key=lambda t: t.pairs())


def standard_tiles() -> List[PathTile]:
    """
    Every distinct path tile, counting rotations of a tile once.

    There are 105 perfect matchings of 8 connectors, which fall into
    35 rotation classes: the classic Tsuro tile set.
    """
    seen: Set[PathTile] = set()
    tiles = []
    for matching in _matchings(tuple(range(CONNECTORS_PER_TILE))):
        canonical = canonical_form(PathTile.from_pairs(matching))
        if canonical not in seen:
            seen.add(canonical)
            tiles.append(canonical)
    return tiles


def format_tile(tile: PathTile) -> str:
    """Textual form accepted by parse_tile."""
    return " ".join(f"{a}{b}" for a, b in tile.pairs())


class Deck:
    """Draw pile. Tiles are popped from the end of the list."""

    def __init__(self, tiles: List[Tile]):
        self.tiles = list(tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def draw_next_tile(self) -> Optional[Tile]:
        """Pop the top tile, or None if the deck is empty."""
        if not self.tiles:
            return None
        return self.tiles.pop()

    @classmethod
    def from_lines(cls, lines: Iterable[str], seed: Optional[int] = None) -> "Deck":
        """
        Build a shuffled deck from tile text lines.

        Blank lines and lines starting with '#' are skipped.

        Args:
            lines: Tile descriptions
            seed: Random seed for a reproducible shuffle

        Returns:
            Deck with the DragonTile drawn last
        """
        tiles: List[Tile] = []
        for line_number, line in enumerate(lines, start=1):
            text = line.strip()
            if not text or text.startswith("#"):
                continue
            try:
                tiles.append(parse_tile(text))
            except ValueError as e:
                raise ValueError(f"Line {line_number}: {e}") from e

        rng = random.Random(seed)
        rng.shuffle(tiles)
        tiles.insert(0, DragonTile())

        logger.debug(f"Built deck of {len(tiles)} tiles (seed={seed})")
        return cls(tiles)

    @classmethod
    def from_file(cls, filename: str, seed: Optional[int] = None) -> "Deck":
        """Build a shuffled deck from a tiles file."""
        with FilePath(filename).open() as f:
            return cls.from_lines(f, seed=seed)

    @classmethod
    def standard(cls, seed: Optional[int] = None) -> "Deck":
        """Shuffled deck of the 35 standard tiles plus the DragonTile."""
        return cls.from_lines((format_tile(tile) for tile in standard_tiles()), seed=seed)
