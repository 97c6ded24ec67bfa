"""Tests for the board model and grid geometry."""

import pytest
from triominos.models.board import Board, PlacedPiece, adjacent_positions, is_pointing_up, side_facing
from triominos.models.piece import Orientation, Piece, Side

from tests.helpers import make_board


def test_cell_parity():
    assert is_pointing_up(0, 0)
    assert is_pointing_up(6, 12)
    assert not is_pointing_up(6, 13)
    assert not is_pointing_up(5, 12)


def test_adjacent_positions_pointing_up():
    # (6, 12) points up: left, right and the cell below
    assert adjacent_positions(6, 12) == [(6, 11), (6, 13), (7, 12)]


def test_adjacent_positions_pointing_down():
    # (6, 13) points down: left, right and the cell above
    assert adjacent_positions(6, 13) == [(6, 12), (6, 14), (5, 13)]


def test_side_facing():
    assert side_facing(6, 12, 6, 11) == Side.LEFT
    assert side_facing(6, 12, 6, 13) == Side.RIGHT
    assert side_facing(6, 12, 7, 12) == Side.BOTTOM
    assert side_facing(6, 13, 5, 13) == Side.TOP


def test_side_facing_rejects_non_neighbors():
    # An up cell has nothing above it
    with pytest.raises(ValueError, match="not adjacent"):
        side_facing(6, 12, 5, 12)

    with pytest.raises(ValueError, match="not adjacent"):
        side_facing(6, 12, 9, 9)


def test_placed_piece_orientation_follows_cell():
    """Whatever the piece carried before, the cell decides its orientation."""
    piece = Piece(1, 1, 2, 3, Orientation.UP)

    placed = PlacedPiece(piece, 6, 13)

    assert placed.piece.orientation == Orientation.DOWN
    assert not placed.is_pointing_up
    assert placed.position == (6, 13)


def test_board_bounds():
    board = Board(12, 24)

    assert board.is_valid_position(0, 0)
    assert board.is_valid_position(11, 23)
    assert not board.is_valid_position(-1, 0)
    assert not board.is_valid_position(12, 0)
    assert not board.is_valid_position(0, 24)


def test_board_rejects_bad_dimensions():
    with pytest.raises(ValueError, match="positive"):
        Board(0, 10)


def test_place_and_query():
    board = Board()
    assert board.is_empty
    assert board.center == (6, 12)

    placed = board.place(Piece(1, 1, 2, 3), 6, 12)

    assert board.pieces_placed == 1
    assert board.is_occupied(6, 12)
    assert not board.is_occupied(6, 13)
    assert board.get_piece_at(6, 12) is placed
    assert board.get_piece_at(6, 13) is None
    assert list(board.occupied_positions()) == [(6, 12)]


def test_placed_pieces_keep_placement_order():
    board = make_board({(6, 12): (1, 2, 3), (6, 13): (1, 4, 2), (6, 14): (0, 0, 0)})

    assert [p.position for p in board.placed_pieces] == [(6, 12), (6, 13), (6, 14)]


def test_edge_facing():
    board = make_board({(6, 12): (1, 2, 3), (6, 13): (1, 4, 2)})

    # Up piece: right (v1, v2), left (v3, v1), bottom (v2, v3)
    assert board.edge_facing(6, 12, 6, 13) == (1, 2)
    assert board.edge_facing(6, 12, 6, 11) == (3, 1)
    assert board.edge_facing(6, 12, 7, 12) == (2, 3)

    # Down piece: left (v3, v1), right (v2, v3), top (v1, v2)
    assert board.edge_facing(6, 13, 6, 12) == (2, 1)
    assert board.edge_facing(6, 13, 6, 14) == (4, 2)
    assert board.edge_facing(6, 13, 5, 13) == (1, 4)


def test_edge_facing_empty_cell():
    with pytest.raises(ValueError, match="No piece"):
        Board().edge_facing(6, 12, 6, 13)


def test_clear():
    board = make_board({(6, 12): (1, 2, 3)})

    board.clear()

    assert board.pieces_placed == 0
    assert board.placed_pieces == []
