"""Tests for connector geometry."""

import pytest
from tsuro_engine.core import (
    FACING_TABLE,
    Position,
    facing,
    mirror_index,
    edge_of,
    outward_indices,
)


def test_facing_neighbours():
    """Each edge faces the expected neighbouring cell."""
    # Interior cell of a 6x6 board
    assert facing(Position(2, 2, 0)) == Position(3, 2, 5)
    assert facing(Position(2, 2, 1)) == Position(3, 2, 4)
    assert facing(Position(2, 2, 2)) == Position(2, 3, 7)
    assert facing(Position(2, 2, 3)) == Position(2, 3, 6)
    assert facing(Position(2, 2, 4)) == Position(1, 2, 1)
    assert facing(Position(2, 2, 5)) == Position(1, 2, 0)
    assert facing(Position(2, 2, 6)) == Position(2, 1, 3)
    assert facing(Position(2, 2, 7)) == Position(2, 1, 2)


def test_facing_off_board():
    """Exiting through the border gives no facing position."""
    assert facing(Position(0, 0, 4)) is None
    assert facing(Position(0, 0, 5)) is None
    assert facing(Position(0, 0, 6)) is None
    assert facing(Position(0, 0, 7)) is None
    assert facing(Position(5, 5, 0)) is None
    assert facing(Position(5, 5, 3)) is None

    # Same cell, inward connectors stay on the board
    assert facing(Position(0, 0, 0)) == Position(1, 0, 5)
    assert facing(Position(0, 0, 2)) == Position(0, 1, 7)


def test_facing_respects_board_size():
    """Board size bounds the neighbour lookup."""
    assert facing(Position(2, 2, 0), size=3) is None
    assert facing(Position(2, 2, 0), size=4) == Position(3, 2, 5)


def test_facing_is_its_own_inverse():
    """Crossing a boundary and crossing back returns to the origin."""
    for row in range(6):
        for col in range(6):
            for index in range(8):
                start = Position(row, col, index)
                forward = facing(start)
                if forward is None:
                    continue
                assert facing(forward) == start


def test_mirror_pairs():
    """Mirrored connectors pair 0-5, 1-4, 2-7, 3-6."""
    pairs = {0: 5, 1: 4, 2: 7, 3: 6}
    for a, b in pairs.items():
        assert mirror_index(a) == b
        assert mirror_index(b) == a


def test_facing_table_shape():
    """Table has one entry per connector and mirrors are involutive."""
    assert len(FACING_TABLE) == 8
    for index, (d_row, d_col, mirrored) in enumerate(FACING_TABLE):
        assert abs(d_row) + abs(d_col) == 1
        assert FACING_TABLE[mirrored][2] == index
        assert FACING_TABLE[mirrored][:2] == (-d_row, -d_col)


def test_edge_names():
    assert edge_of(0) == "bottom"
    assert edge_of(3) == "right"
    assert edge_of(5) == "top"
    assert edge_of(6) == "left"


def test_outward_indices():
    """Corners have four outward connectors, edges two, interior none."""
    assert outward_indices(0, 0) == (4, 5, 6, 7)
    assert outward_indices(0, 3) == (4, 5)
    assert outward_indices(5, 5) == (0, 1, 2, 3)
    assert outward_indices(3, 0) == (6, 7)
    assert outward_indices(2, 3) == ()


def test_invalid_index():
    """Connector indices outside 0-7 fail loudly."""
    with pytest.raises(ValueError):
        Position(0, 0, 8)

    with pytest.raises(ValueError):
        Position(0, 0, -1)

    with pytest.raises(ValueError):
        mirror_index(9)

    with pytest.raises(ValueError):
        edge_of(-3)
