"""Game models for Triominos."""

from .piece import Piece, Orientation, Side
from .board import Board, PlacedPiece
from .draw_pile import DrawPile
from .player import Player
from .game_state import GameSession, GamePhase, GameEndReason, Selection

__all__ = [
    "Piece",
    "Orientation",
    "Side",
    "Board",
    "PlacedPiece",
    "DrawPile",
    "Player",
    "GameSession",
    "GamePhase",
    "GameEndReason",
    "Selection",
]
