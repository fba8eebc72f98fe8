"""
Path tiles and rotation.

A PathTile carries exactly 4 paths that together pair up all 8 connector
indices (a perfect matching). A DragonTile has no paths and stops any
stone that would enter it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from .geometry import CONNECTORS_PER_TILE, validate_index

PATHS_PER_TILE = CONNECTORS_PER_TILE // 2


class Rotation(Enum):
    """
    Quarter turns applied when a tile is placed.

    Each step moves connectors one edge round: bottom to right, right to
    top, top to left. With rows growing downward that is counterclockwise.
    """

    R0 = 0
    R90 = 90
    R180 = 180
    R270 = 270

    @property
    def offset(self) -> int:
        """Amount added (mod 8) to each connector index."""
        return self.value // 45

    @property
    def steps(self) -> int:
        """Number of quarter turns."""
        return self.value // 90

    @classmethod
    def from_steps(cls, steps: int) -> "Rotation":
        return cls((steps % 4) * 90)


def compose(first: Rotation, second: Rotation) -> Rotation:
    """Rotation equivalent to applying first, then second."""
    return Rotation.from_steps(first.steps + second.steps)


@dataclass(frozen=True, order=True)
class Path:
    """Undirected connection between two connectors of one tile."""

    a: int
    b: int

    def __post_init__(self) -> None:
        validate_index(self.a)
        validate_index(self.b)
        if self.a == self.b:
            raise ValueError(f"Path cannot connect connector {self.a} to itself")
        # Store endpoints in ascending order so equal pairs compare equal
        if self.a > self.b:
            low, high = self.b, self.a
            object.__setattr__(self, "a", low)
            object.__setattr__(self, "b", high)

    def other(self, index: int) -> int:
        if index == self.a:
            return self.b
        if index == self.b:
            return self.a
        raise ValueError(f"Connector {index} is not an end of path {self}")

    def rotated(self, rotation: Rotation) -> "Path":
        offset = rotation.offset
        return Path(
            (self.a + offset) % CONNECTORS_PER_TILE,
            (self.b + offset) % CONNECTORS_PER_TILE,
        )

    def __str__(self) -> str:
        return f"{self.a}-{self.b}"


@dataclass(frozen=True)
class DragonTile:
    """Sentinel tile with no paths, drawn last from the deck."""

    def __str__(self) -> str:
        return "Dragon"


@dataclass(frozen=True)
class PathTile:
    """
    Tile with 4 paths forming a perfect matching over connectors 0-7.

    Paths are kept sorted so two tiles with the same pairing are equal
    regardless of the order the paths were given in.
    """

    paths: Tuple[Path, ...]

    def __post_init__(self) -> None:
        paths = tuple(sorted(self.paths))
        if len(paths) != PATHS_PER_TILE:
            raise ValueError(
                f"Tile must have {PATHS_PER_TILE} paths, got {len(paths)}"
            )

        seen = [index for path in paths for index in (path.a, path.b)]
        if sorted(seen) != list(range(CONNECTORS_PER_TILE)):
            raise ValueError(
                f"Tile paths {[str(p) for p in paths]} do not pair every connector exactly once"
            )

        object.__setattr__(self, "paths", paths)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> "PathTile":
        """Build a tile from (a, b) tuples."""
        return cls(tuple(Path(a, b) for a, b in pairs))

    def pairs(self) -> Tuple[Tuple[int, int], ...]:
        return tuple((path.a, path.b) for path in self.paths)

    def __str__(self) -> str:
        return " ".join(str(path) for path in self.paths)


Tile = Union[DragonTile, PathTile]


def rotate(tile: Tile, rotation: Rotation) -> Tile:
    """
    Return tile rotated by rotation.

    DragonTile is returned unchanged. The input tile is never modified.
    """
    if isinstance(tile, DragonTile):
        return tile
    if rotation is Rotation.R0:
        return tile
    return PathTile(tuple(path.rotated(rotation) for path in tile.paths))


def other_end(tile: Tile, from_index: int) -> int:
    """
    Get the connector paired with from_index on tile.

    Raises:
        ValueError: if tile is a DragonTile or from_index is not on any path
    """
    validate_index(from_index)

    if isinstance(tile, DragonTile):
        raise ValueError("DragonTile has no paths to follow")

    for path in tile.paths:
        if from_index in (path.a, path.b):
            return path.other(from_index)

    raise ValueError(f"Connector {from_index} is not on any path of tile {tile}")


def parse_tile(tile_text: str) -> PathTile:
    """
    Parse the textual tile form: 8 digits, read as 4 consecutive pairs.

    Spaces are ignored, so "01 25 34 67" and "01253467" are the same tile.

    Raises:
        ValueError: on non-numeric text or a malformed pairing
    """
    digits_text = tile_text.replace(" ", "").strip()
    if not digits_text or any(char not in "0123456789" for char in digits_text):
        raise ValueError(f"Tile data must be numeric: {tile_text!r}")

    digits = [int(char) for char in digits_text]
    if len(digits) != CONNECTORS_PER_TILE:
        raise ValueError(
            f"Tile data must have {CONNECTORS_PER_TILE} digits, got {len(digits)}: {tile_text!r}"
        )

    return PathTile.from_pairs(zip(digits[0::2], digits[1::2]))
