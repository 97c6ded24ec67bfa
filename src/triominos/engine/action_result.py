"""Action result system for structured game engine responses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any


class ActionResultType(Enum):
    """Types of action results."""
    # Game flow
    GAME_STARTED = "game_started"
    GAME_RESET = "game_reset"
    TURN_ENDED = "turn_ended"
    GAME_ENDED = "game_ended"

    # Selection
    PIECE_SELECTED = "piece_selected"
    PIECE_DESELECTED = "piece_deselected"
    PIECE_ROTATED = "piece_rotated"

    # Piece actions
    PIECE_PLACED = "piece_placed"
    PIECE_ADDED_TO_RACK = "piece_added_to_rack"

    # Errors
    ACTION_FAILED = "action_failed"


@dataclass
class ActionResult:
    """Uniform result returned by every engine command.

    Rule violations come back as unsuccessful results carrying a message;
    they are never raised.
    """
    success: bool
    action_type: str
    result_type: ActionResultType
    message: str = ""
    points_scored: int = 0
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success_result(cls, action_type: str, result_type: ActionResultType, message: str,
                       points_scored: int = 0, **data) -> 'ActionResult':
        """Create a successful action result."""
        return cls(
            success=True,
            action_type=action_type,
            result_type=result_type,
            message=message,
            points_scored=points_scored,
            data=data
        )

    @classmethod
    def failure_result(cls, action_type: str, message: str) -> 'ActionResult':
        """Create a failed action result."""
        return cls(
            success=False,
            action_type=action_type,
            result_type=ActionResultType.ACTION_FAILED,
            message=message
        )

    def __bool__(self) -> bool:
        return self.success
