"""Event system for notifying presentation layers about game changes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..models.board import PlacedPiece
from ..models.game_state import GameEndReason, GamePhase
from ..models.piece import Piece
from ..models.player import Player
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class GameEvent(Enum):
    """Types of notifications the engine emits."""
    STATE_CHANGED = "state_changed"
    PIECE_PLACED = "piece_placed"
    PLAYER_CHANGED = "player_changed"
    GAME_ENDED = "game_ended"
    SELECTION_CHANGED = "selection_changed"


@dataclass
class EventContext:
    """Context information for game events."""
    event_type: GameEvent
    message: str = ""

    # State changes
    phase: Optional[GamePhase] = None

    # Placements
    placed_piece: Optional[PlacedPiece] = None
    points: int = 0

    # Player changes
    previous_player: Optional[Player] = None
    player: Optional[Player] = None

    # Game end
    winner: Optional[Player] = None
    reason: Optional[GameEndReason] = None
    standings: List[Player] = field(default_factory=list)

    # Selection changes
    piece: Optional[Piece] = None
    from_pool: bool = False


Listener = Callable[[EventContext], Any]


class GameEventManager:
    """Keeps per-event listener lists and dispatches events synchronously.

    Listeners run in subscription order, inline with the mutation that caused
    the event. Exceptions raised by a listener propagate to the caller.
    """

    def __init__(self):
        self._listeners: Dict[GameEvent, List[Listener]] = {}
        self.last_event: Optional[EventContext] = None

    def subscribe(self, event: GameEvent, listener: Listener) -> None:
        """Register a listener for one event type."""
        self._listeners.setdefault(event, []).append(listener)

    def unsubscribe(self, event: GameEvent, listener: Listener) -> bool:
        """Remove a listener. Returns True if it was registered."""
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def listener_count(self, event: GameEvent) -> int:
        return len(self._listeners.get(event, []))

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def trigger_event(self, event_context: EventContext) -> None:
        """Deliver an event to every listener registered for its type."""
        self.last_event = event_context
        listeners = list(self._listeners.get(event_context.event_type, []))
        logger.debug(f"{event_context.event_type.value} -> {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event_context)

    def get_last_event(self) -> Optional[EventContext]:
        """Get the most recent event for inspection."""
        return self.last_event

    def clear_last_event(self) -> None:
        self.last_event = None
