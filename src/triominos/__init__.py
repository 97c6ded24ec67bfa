"""Triominos rules and turn engine."""

__version__ = "0.1.0"

# Set up logging configuration on import
from .utils.logging_config import setup_logging_from_env

setup_logging_from_env()

from . import models
from . import utils
from . import engine
from .engine import GameEngine, RuleConfig, GameEvent
from .models import Piece, Board, DrawPile, Player, GamePhase

__all__ = [
    "models",
    "utils",
    "engine",
    "GameEngine",
    "RuleConfig",
    "GameEvent",
    "Piece",
    "Board",
    "DrawPile",
    "Player",
    "GamePhase",
]
