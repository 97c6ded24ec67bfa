"""Move validation against the live game session."""

from typing import Iterator, List

from ..models.board import Position
from ..models.game_state import GamePhase, GameSession
from ..models.piece import Piece
from . import game_rules
from .game_rules import PlacementValidationResult


class MoveValidator:
    """Answers rule questions about the current session without changing it."""

    def __init__(self, session: GameSession):
        self.session = session

    def is_in_progress(self) -> bool:
        return self.session.phase == GamePhase.PLAYING

    def validate_placement(self, piece: Piece, row: int, col: int) -> PlacementValidationResult:
        """Validate a piece at (row, col), trying all three rotations."""
        board = self.session.board
        if not board.is_valid_position(row, col):
            return PlacementValidationResult.failed(f"Position ({row}, {col}) is outside the board")
        return game_rules.find_valid_rotation(piece, row, col, board, self.session.is_first_move)

    def can_place_at(self, row: int, col: int) -> bool:
        """Check whether the selected piece fits at (row, col) in any rotation."""
        piece = self.session.selected_piece
        if piece is None:
            return False
        return self.validate_placement(piece, row, col).is_valid

    def get_valid_placements(self) -> Iterator[Position]:
        """Lazily yield the cells where the selected piece fits."""
        piece = self.session.selected_piece
        if piece is None:
            return iter(())
        return game_rules.get_valid_placements(piece, self.session.board)

    def get_playable_rack_pieces(self) -> List[Piece]:
        """Pieces in the current player's rack that fit somewhere on the board."""
        player = self.session.current_player
        if player is None:
            return []
        board = self.session.board
        return [piece for piece in player.rack if game_rules.has_any_valid_placement([piece], board)]

    def all_players_blocked(self) -> bool:
        """True when the pile is empty and no player holds a piece that fits anywhere."""
        if self.session.draw_pile.has_pieces:
            return False
        board = self.session.board
        return not any(game_rules.has_any_valid_placement(player.rack, board)
                       for player in self.session.players)
