"""Engine package for game rules and logic."""

from .rules_config import RuleConfig, DEFAULT_RULES
from .game_rules import PlacementValidationResult
from .action_result import ActionResult, ActionResultType
from .event_system import GameEvent, EventContext, GameEventManager
from .move_validator import MoveValidator
from .game_engine import GameEngine

__all__ = [
    'RuleConfig',
    'DEFAULT_RULES',
    'PlacementValidationResult',
    'ActionResult',
    'ActionResultType',
    'GameEvent',
    'EventContext',
    'GameEventManager',
    'MoveValidator',
    'GameEngine',
]
