"""Game session state for Triominos."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board
from .draw_pile import DrawPile
from .piece import Piece
from .player import Player


class GamePhase(Enum):
    """Phases of a game."""
    SETUP = "setup"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameEndReason(Enum):
    """Reasons why a game might end."""
    PLAYER_WENT_OUT = "player_went_out"
    ALL_PLAYERS_BLOCKED = "all_players_blocked"


@dataclass(frozen=True)
class Selection:
    """The piece currently picked up, tagged with where it came from."""
    piece: Piece
    from_pool: bool = False


@dataclass
class GameSession:
    """Tracks the complete mutable state of a game."""
    board: Board
    draw_pile: DrawPile
    phase: GamePhase = GamePhase.SETUP

    # Players and turn management
    players: List[Player] = field(default_factory=list)
    current_player_index: int = 0

    # Selection
    selection: Optional[Selection] = None

    # Scoring
    total_score: int = 0

    # Game over state
    winner: Optional[Player] = None
    end_reason: Optional[GameEndReason] = None
    standings: List[Player] = field(default_factory=list)

    @property
    def current_player(self) -> Optional[Player]:
        """Get the currently active player, if the game has players."""
        if not self.players:
            return None
        return self.players[self.current_player_index]

    @property
    def is_first_move(self) -> bool:
        """True while the board is still empty."""
        return self.board.pieces_placed == 0

    @property
    def selected_piece(self) -> Optional[Piece]:
        return self.selection.piece if self.selection else None

    @property
    def is_selecting_from_pool(self) -> bool:
        return self.selection is not None and self.selection.from_pool

    def get_player(self, index: int) -> Player:
        """Get a player by seat index.

        Raises:
            IndexError: If no player sits at that index.
        """
        if index < 0 or index >= len(self.players):
            raise IndexError(f"Player index {index} out of range for {len(self.players)} players")
        return self.players[index]

    def clear_selection(self) -> None:
        self.selection = None

    def advance_player(self) -> Tuple[Player, Player]:
        """Hand the turn to the next player in seat order.

        Returns:
            The previous and the new current player.
        """
        previous = self.get_player(self.current_player_index)
        previous.is_current_player = False
        self.current_player_index = (self.current_player_index + 1) % len(self.players)
        current = self.players[self.current_player_index]
        current.is_current_player = True
        self.selection = None
        return previous, current

    def reset(self) -> None:
        """Clear all mutable state and return to setup."""
        self.players.clear()
        self.board.clear()
        self.draw_pile.clear()
        self.selection = None
        self.total_score = 0
        self.current_player_index = 0
        self.winner = None
        self.end_reason = None
        self.standings = []
        self.phase = GamePhase.SETUP

    def __str__(self) -> str:
        """String representation of the game state."""
        if self.current_player is None:
            return f"{self.phase.value.title()} - no players"
        return f"{self.phase.value.title()} - {self.current_player.name}'s turn - {self.board}"
