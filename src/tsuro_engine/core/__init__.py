"""Core board model: geometry, tiles, board and deck."""

from .geometry import (
    TILES_PER_ROW,
    CONNECTORS_PER_TILE,
    FACING_TABLE,
    Position,
    facing,
    mirror_index,
    edge_of,
    outward_indices,
    validate_index,
)
from .tile import (
    Rotation,
    Path,
    DragonTile,
    PathTile,
    Tile,
    compose,
    rotate,
    other_end,
    parse_tile,
)
from .board import Board, Stone, make_spawns
from .deck import Deck, standard_tiles, canonical_form, format_tile

__all__ = [
    "TILES_PER_ROW",
    "CONNECTORS_PER_TILE",
    "FACING_TABLE",
    "Position",
    "facing",
    "mirror_index",
    "edge_of",
    "outward_indices",
    "validate_index",
    "Rotation",
    "Path",
    "DragonTile",
    "PathTile",
    "Tile",
    "compose",
    "rotate",
    "other_end",
    "parse_tile",
    "Board",
    "Stone",
    "make_spawns",
    "Deck",
    "standard_tiles",
    "canonical_form",
    "format_tile",
]
