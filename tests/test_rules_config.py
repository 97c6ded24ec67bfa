"""Tests for rule configuration."""

import pytest
from triominos.engine.rules_config import DEFAULT_RULES, RuleConfig


def test_standard_defaults():
    assert DEFAULT_RULES.total_pieces == 56
    assert DEFAULT_RULES.pieces_per_player == 7
    assert (DEFAULT_RULES.board_rows, DEFAULT_RULES.board_cols) == (12, 24)
    assert DEFAULT_RULES.first_move_triple_bonus == 10
    assert DEFAULT_RULES.bridge_bonus == 40
    assert DEFAULT_RULES.hexagon_bonus == 50
    assert not DEFAULT_RULES.award_going_out_bonus


def test_player_count_range():
    assert not DEFAULT_RULES.is_valid_player_count(0)
    assert DEFAULT_RULES.is_valid_player_count(1)
    assert DEFAULT_RULES.is_valid_player_count(4)
    assert not DEFAULT_RULES.is_valid_player_count(5)


def test_total_pieces_follows_value_range():
    assert RuleConfig(max_piece_value=2).total_pieces == 10


@pytest.mark.parametrize("kwargs, match", [
    ({"board_rows": 0}, "Board dimensions"),
    ({"min_players": 3, "max_players": 2}, "player range"),
    ({"min_piece_value": 4, "max_piece_value": 3}, "piece value range"),
    ({"pieces_per_player": 0}, "Pieces per player"),
    ({"hexagon_bonus": -1}, "Bonuses"),
])
def test_invalid_config(kwargs, match):
    with pytest.raises(ValueError, match=match):
        RuleConfig(**kwargs)


def test_config_is_immutable():
    with pytest.raises(Exception):
        DEFAULT_RULES.bridge_bonus = 0
