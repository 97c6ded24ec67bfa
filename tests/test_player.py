"""Tests for the player model."""

import pytest
from triominos.models.piece import Piece
from triominos.models.player import Player


def test_player_creation():
    player = Player(1, "Player 1")

    assert player.score == 0
    assert player.rack == []
    assert player.pieces_remaining == 0
    assert not player.is_current_player
    assert str(player) == "Player 1 (Score: 0, Pieces: 0)"


def test_rack_operations():
    player = Player(1, "Alice")
    piece = Piece(3, 1, 2, 3)
    player.add_piece(piece)
    player.add_piece(Piece(4, 0, 0, 1))

    assert player.pieces_remaining == 2
    assert player.rack_value == 7
    assert player.has_piece(piece.rotate())
    assert player.find_piece(4).values == (0, 0, 1)

    assert player.remove_piece(piece)
    assert not player.remove_piece(piece)
    assert player.pieces_remaining == 1


def test_replace_piece_keeps_slot():
    player = Player(1, "Alice")
    player.add_piece(Piece(3, 1, 2, 3))

    assert player.replace_piece(Piece(3, 3, 1, 2))
    assert player.rack[0].values == (3, 1, 2)
    assert not player.replace_piece(Piece(8, 1, 1, 1))


def test_score_only_grows():
    player = Player(1, "Alice")
    player.add_score(12)
    player.add_score(0)

    assert player.score == 12

    with pytest.raises(ValueError, match="only increase"):
        player.add_score(-5)

    player.reset_score()
    assert player.score == 0
