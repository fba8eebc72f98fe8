"""
Board state and stone movement resolution.

Placing a tile forces every stone that was waiting on that cell, or
facing into it, to slide along the drawn paths. A stone keeps sliding
through already-placed tiles until it faces the board edge, an empty
cell or a DragonTile.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .geometry import TILES_PER_ROW, Position, facing, outward_indices
from .tile import DragonTile, PathTile, Tile, other_end

logger = logging.getLogger(__name__)


@dataclass
class Stone:
    """A player's marker. Updated in place as placements move it."""

    color: str
    position: Position
    exited: bool = False  # Slid off the board edge during a resolution
    route: List[Position] = field(default_factory=list)  # Last resolution

    def __str__(self) -> str:
        status = " (exited)" if self.exited else ""
        return f"{self.color}@{self.position}{status}"


def make_spawns(size: int = TILES_PER_ROW) -> Tuple[Position, ...]:
    """
    Enumerate every border connector that faces off the board.

    Each border cell contributes the two outward indices of every board
    edge it touches, so corner cells contribute four.
    """
    spawns = []
    for row in range(size):
        for col in range(size):
            for index in outward_indices(row, col, size):
                spawns.append(Position(row, col, index))
    return tuple(spawns)


class Board:
    """
    Square grid of tiles plus the stones standing on it.

    Grid layout for size=3 (cells are (row, col)):
        (0,0) (0,1) (0,2)   <- top edge, spawns on connectors 4/5
        (1,0) (1,1) (1,2)
        (2,0) (2,1) (2,2)   <- bottom edge, spawns on connectors 0/1
    """

    def __init__(self, size: int = TILES_PER_ROW):
        """
        Initialize an empty board.

        Args:
            size: Number of cells per side
        """
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")

        self.size = size
        self.grid: List[List[Optional[Tile]]] = [[None] * size for _ in range(size)]
        self.spawns: Tuple[Position, ...] = make_spawns(size)
        self.stones: Dict[str, Stone] = {}

        # Each path on the board can be crossed at most once per resolution
        self.max_steps = 4 * size * size

    def _check_cell(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(
                f"Cell ({row},{col}) is off a {self.size}x{self.size} board"
            )

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        """Tile placed on a cell, or None if the cell is empty."""
        self._check_cell(row, col)
        return self.grid[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.tile_at(row, col) is None

    @property
    def tiles_placed(self) -> int:
        return sum(1 for row in self.grid for tile in row if tile is not None)

    def add_stone(self, color: str, position: Position) -> Stone:
        """
        Put a new stone on the board.

        Args:
            color: Owning player, unique per board
            position: Starting connector, usually one of self.spawns

        Returns:
            The created Stone

        Raises:
            ValueError: if the color is taken, or the position is on a tiled
                cell and faces off the board (no placement could move it)
        """
        if color in self.stones:
            raise ValueError(f"Stone {color!r} is already on the board")
        if not self.is_empty(position.row, position.col) and facing(position, self.size) is None:
            raise ValueError(f"Stone {color!r} at {position} could never move")

        stone = Stone(color=color, position=position)
        self.stones[color] = stone
        logger.debug(f"Added stone {stone}")
        return stone

    def stone(self, color: str) -> Stone:
        return self.stones[color]

    def active_stones(self) -> List[Stone]:
        """Stones that have not slid off the board."""
        return [stone for stone in self.stones.values() if not stone.exited]

    def is_affected(self, position: Position, row: int, col: int) -> bool:
        """
        Check if a stone at position must move when a tile lands on (row, col).

        True if the stone stands on that cell, or if its connector faces
        into that cell.
        """
        if position.cell == (row, col):
            return True

        facing_position = facing(position, self.size)
        return facing_position is not None and facing_position.cell == (row, col)

    def place_tile(self, row: int, col: int, tile: Tile) -> List[Stone]:
        """
        Place a tile and move every stone it affects.

        Args:
            row: Cell row
            col: Cell column
            tile: Tile, already rotated

        Returns:
            Stones whose resolution was triggered by this placement

        Raises:
            IndexError: if (row, col) is off the board
            ValueError: if the cell already holds a tile
        """
        self._check_cell(row, col)
        if self.grid[row][col] is not None:
            raise ValueError(f"Cell ({row},{col}) already holds {self.grid[row][col]}")

        self.grid[row][col] = tile
        logger.debug(f"Placed {tile} at ({row},{col})")

        affected = [
            stone
            for stone in self.stones.values()
            if not stone.exited and self.is_affected(stone.position, row, col)
        ]

        for stone in affected:
            route = self.resolve(stone, (row, col))
            stone.route = route
            stone.position = route[-1]

            # Moved, and the final connector points off the board
            if len(route) > 1 and facing(stone.position, self.size) is None:
                stone.exited = True

            logger.debug(
                f"Stone {stone.color} moved {' -> '.join(str(p) for p in route)}"
                + (" and left the board" if stone.exited else "")
            )

        return affected

    def resolve(
        self, stone: Stone, placed_cell: Optional[Tuple[int, int]] = None
    ) -> List[Position]:
        """
        Trace the route a stone takes through the current grid.

        Does not modify the stone.

        Args:
            stone: Stone to move
            placed_cell: Cell that just received a tile. A stone standing on
                that cell crosses the new tile before following its facing.

        Returns:
            Visited positions, starting with the stone's current position
            and ending at its final resting position
        """
        current = stone.position
        route = [current]

        own_tile = self.grid[current.row][current.col]
        if current.cell == placed_cell and isinstance(own_tile, PathTile):
            current = Position(current.row, current.col, other_end(own_tile, current.index))
            route.append(current)

        for _ in range(self.max_steps):
            next_position = facing(current, self.size)
            if next_position is None:
                return route

            tile = self.grid[next_position.row][next_position.col]
            if tile is None or isinstance(tile, DragonTile):
                return route

            current = Position(
                next_position.row,
                next_position.col,
                other_end(tile, next_position.index),
            )
            route.append(current)

        raise RuntimeError(
            f"Route for stone {stone.color} exceeded {self.max_steps} steps: grid is corrupt"
        )

    def collisions(self) -> List[Tuple[str, ...]]:
        """Groups of stone colors that share the same position."""
        by_position: Dict[Position, List[str]] = {}
        for stone in self.stones.values():
            by_position.setdefault(stone.position, []).append(stone.color)

        return [tuple(colors) for colors in by_position.values() if len(colors) > 1]

    def waiting_cell(self, color: str) -> Optional[Tuple[int, int]]:
        """
        Cell where the next tile would move this stone.

        The stone's own cell if still empty, else the cell its connector
        faces. None if the stone faces the edge or an occupied cell.
        """
        stone = self.stones[color]
        if stone.exited:
            return None

        if self.is_empty(stone.position.row, stone.position.col):
            return stone.position.cell

        facing_position = facing(stone.position, self.size)
        if facing_position is None:
            return None
        if not self.is_empty(facing_position.row, facing_position.col):
            return None
        return facing_position.cell

    def __str__(self) -> str:
        lines = []
        for row in self.grid:
            cells = []
            for tile in row:
                if tile is None:
                    cells.append(".")
                elif isinstance(tile, DragonTile):
                    cells.append("D")
                else:
                    cells.append("T")
            lines.append(" ".join(cells))
        stones = ", ".join(str(stone) for stone in self.stones.values())
        return "\n".join(lines) + (f"\nStones: {stones}" if stones else "")
