"""
Connector geometry for square path tiles.

Every tile has 8 connectors, two per edge (rotation 0):

          5   4
        +-------+
      6 |       | 3
      7 |       | 2
        +-------+
          0   1

- Bottom edge: 0, 1 (faces row + 1)
- Right edge:  2, 3 (faces col + 1)
- Top edge:    4, 5 (faces row - 1)
- Left edge:   6, 7 (faces col - 1)

Crossing a cell boundary lands on the mirrored connector of the
neighbouring tile: 0<->5, 1<->4, 2<->7, 3<->6.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

TILES_PER_ROW = 6
CONNECTORS_PER_TILE = 8

# index -> (delta_row, delta_col, mirrored_index)
FACING_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 5),
    (1, 0, 4),
    (0, 1, 7),
    (0, 1, 6),
    (-1, 0, 1),
    (-1, 0, 0),
    (0, -1, 3),
    (0, -1, 2),
)

EDGE_NAMES = ("bottom", "bottom", "right", "right", "top", "top", "left", "left")


@dataclass(frozen=True)
class Position:
    """A connector point on a grid cell."""

    row: int
    col: int
    index: int  # Connector index 0-7

    def __post_init__(self) -> None:
        validate_index(self.index)

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row},{self.col},{self.index})"


def validate_index(index: int) -> int:
    """Raise ValueError unless index is a connector index 0-7."""
    if not isinstance(index, int) or isinstance(index, bool):
        raise ValueError(f"Connector index must be an int, got {index!r}")
    if not 0 <= index < CONNECTORS_PER_TILE:
        raise ValueError(f"Invalid connector index {index}, must be 0-7")
    return index


def edge_of(index: int) -> str:
    """Name of the tile edge a connector sits on."""
    return EDGE_NAMES[validate_index(index)]


def mirror_index(index: int) -> int:
    """Connector reached on the neighbouring tile when exiting through index."""
    return FACING_TABLE[validate_index(index)][2]


def facing(position: Position, size: int = TILES_PER_ROW) -> Optional[Position]:
    """
    Get the position a stone enters when it leaves its cell through its connector.

    Args:
        position: Current stone position
        size: Board side length

    Returns:
        Position on the neighbouring cell, or None if that cell is off the board
    """
    d_row, d_col, mirrored = FACING_TABLE[validate_index(position.index)]
    row = position.row + d_row
    col = position.col + d_col

    if not (0 <= row < size and 0 <= col < size):
        return None

    return Position(row, col, mirrored)


def outward_indices(row: int, col: int, size: int = TILES_PER_ROW) -> Tuple[int, ...]:
    """
    Connector indices of a cell that face off the board.

    Corner cells have four, other border cells two, interior cells none.
    """
    return tuple(
        index
        for index in range(CONNECTORS_PER_TILE)
        if facing(Position(row, col, index), size) is None
    )
