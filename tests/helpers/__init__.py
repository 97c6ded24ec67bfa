"""Test helper utilities for Triominos tests."""

from .board_helpers import make_piece, make_board, piece_by_values
from .game_engine_test_base import GameEngineTestBase, ScriptedRandom, EventRecorder

__all__ = [
    'make_piece',
    'make_board',
    'piece_by_values',
    'GameEngineTestBase',
    'ScriptedRandom',
    'EventRecorder',
]
