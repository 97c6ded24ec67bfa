"""Builders for pieces and hand-laid boards."""

import itertools
from typing import Dict, Tuple

from triominos.models.board import Board
from triominos.models.draw_pile import DrawPile
from triominos.models.piece import Piece


_ids = itertools.count(1000)


def make_piece(v1: int, v2: int, v3: int, piece_id: int = None) -> Piece:
    """Create a piece with the given corners. Ids default to a fresh value outside the standard set."""
    if piece_id is None:
        piece_id = next(_ids)
    return Piece(piece_id, v1, v2, v3)


def piece_by_values(v1: int, v2: int, v3: int) -> Piece:
    """Look up the standard-set piece with these sorted corner values."""
    for piece in DrawPile.generate_all():
        if piece.values == (v1, v2, v3):
            return piece
    raise LookupError(f"No standard piece ({v1}, {v2}, {v3})")


def make_board(placements: Dict[Tuple[int, int], Tuple[int, int, int]] = None,
               rows: int = 12, cols: int = 24) -> Board:
    """Lay pieces straight onto a board without any rule checks."""
    board = Board(rows, cols)
    for (row, col), values in (placements or {}).items():
        board.place(make_piece(*values), row, col)
    return board
