"""Game engine for executing commands and managing turn state transitions."""

import random
from typing import Iterator, List, Optional

from ..models.board import Board, PlacedPiece, Position
from ..models.draw_pile import DrawPile
from ..models.game_state import GameEndReason, GamePhase, GameSession, Selection
from ..models.piece import Piece
from ..models.player import Player
from ..utils.logging_config import get_game_logger
from . import game_rules
from .action_result import ActionResult, ActionResultType
from .event_system import EventContext, GameEvent, GameEventManager, Listener
from .move_validator import MoveValidator
from .rules_config import DEFAULT_RULES, RuleConfig

logger = get_game_logger(__name__)


class GameEngine:
    """Turn-based state machine driving a game of Triominos.

    Callers issue commands (start, select, rotate, place, ...) and get an
    ActionResult back. Successful commands mutate the session and fire
    notifications inline; failed commands leave everything untouched.
    """

    def __init__(self, config: RuleConfig = DEFAULT_RULES, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.session = GameSession(
            board=Board(config.board_rows, config.board_cols),
            draw_pile=DrawPile(self.rng, config.min_piece_value, config.max_piece_value),
        )
        self.validator = MoveValidator(self.session)
        self.event_manager = GameEventManager()

    # =============================================================================
    # QUERIES
    # =============================================================================

    @property
    def phase(self) -> GamePhase:
        return self.session.phase

    @property
    def players(self) -> List[Player]:
        return list(self.session.players)

    @property
    def current_player(self) -> Optional[Player]:
        return self.session.current_player

    @property
    def board(self) -> Board:
        return self.session.board

    @property
    def draw_pile(self) -> DrawPile:
        return self.session.draw_pile

    @property
    def selection(self) -> Optional[Selection]:
        return self.session.selection

    @property
    def selected_piece(self) -> Optional[Piece]:
        return self.session.selected_piece

    @property
    def is_selecting_from_pool(self) -> bool:
        return self.session.is_selecting_from_pool

    @property
    def is_first_move(self) -> bool:
        return self.session.is_first_move

    @property
    def total_score(self) -> int:
        return self.session.total_score

    @property
    def winner(self) -> Optional[Player]:
        return self.session.winner

    @property
    def end_reason(self) -> Optional[GameEndReason]:
        return self.session.end_reason

    def get_player(self, index: int) -> Player:
        """Get a player by seat index. Raises IndexError for a missing seat."""
        return self.session.get_player(index)

    def get_standings(self) -> List[Player]:
        """Players ranked by descending score, ties in seat order."""
        return game_rules.rank_players(self.session.players)

    def get_valid_placements(self) -> Iterator[Position]:
        """Lazily yield the cells where the selected piece can go."""
        return self.validator.get_valid_placements()

    def can_place_at(self, row: int, col: int) -> bool:
        """Check whether the selected piece fits at (row, col) in some rotation."""
        return self.validator.can_place_at(row, col)

    # =============================================================================
    # NOTIFICATIONS
    # =============================================================================

    def subscribe(self, event: GameEvent, listener: Listener) -> None:
        self.event_manager.subscribe(event, listener)

    def unsubscribe(self, event: GameEvent, listener: Listener) -> bool:
        return self.event_manager.unsubscribe(event, listener)

    # =============================================================================
    # GAME FLOW
    # =============================================================================

    def start_game(self, number_of_players: int) -> ActionResult:
        """Deal a new game for the given number of players."""
        if self.session.phase != GamePhase.SETUP:
            return self._fail("start_game", "Game has already started")

        if not self.config.is_valid_player_count(number_of_players):
            return self._fail(
                "start_game",
                f"Player count must be between {self.config.min_players} and {self.config.max_players}"
            )

        self.session.reset()
        self.session.draw_pile.initialize()

        self._place_initial_piece()

        for i in range(number_of_players):
            player = Player(i + 1, f"Player {i + 1}")
            self._deal_pieces(player, self.config.pieces_per_player)
            self.session.players.append(player)

        self.session.players[0].is_current_player = True
        self.session.current_player_index = 0
        self.session.phase = GamePhase.PLAYING

        logger.info(f"Game started with {number_of_players} player(s), "
                    f"{self.session.draw_pile.count} pieces left in the pool")
        self._emit(GameEvent.STATE_CHANGED, phase=GamePhase.PLAYING,
                   message=f"Game started! {self.session.current_player.name}'s turn.")

        return ActionResult.success_result("start_game", ActionResultType.GAME_STARTED,
                                           "Game started successfully")

    def reset_game(self) -> ActionResult:
        """Clear everything and go back to setup. Allowed from any phase."""
        self.session.reset()
        logger.info("Game reset")
        self._emit(GameEvent.STATE_CHANGED, phase=GamePhase.SETUP, message="Game reset")
        return ActionResult.success_result("reset_game", ActionResultType.GAME_RESET, "Game reset")

    def end_turn(self) -> ActionResult:
        """Pass the turn to the next player."""
        if self.session.phase != GamePhase.PLAYING:
            return self._fail("end_turn", "Game is not in progress")

        if self.config.end_when_blocked and self.validator.all_players_blocked():
            standings = self._end_game(None, GameEndReason.ALL_PLAYERS_BLOCKED)
            return ActionResult.success_result("end_turn", ActionResultType.GAME_ENDED,
                                               "No player can move. Game over!", standings=standings)

        self._advance_to_next_player()
        return ActionResult.success_result("end_turn", ActionResultType.TURN_ENDED,
                                           f"{self.session.current_player.name}'s turn")

    # =============================================================================
    # PIECE OPERATIONS
    # =============================================================================

    def select_from_rack(self, piece: Piece) -> ActionResult:
        """Pick up a piece from the current player's rack, or put it back if already held."""
        if self.session.phase != GamePhase.PLAYING:
            return self._fail("select_from_rack", "Game is not in progress")

        player = self.session.current_player
        held = player.find_piece(piece.id)
        if held is None:
            return self._fail("select_from_rack", "Piece is not in your rack")

        return self._toggle_selection("select_from_rack", held, from_pool=False)

    def select_from_pool(self, piece: Piece) -> ActionResult:
        """Pick up a piece from the draw pile, or put it back if already held."""
        if self.session.phase != GamePhase.PLAYING:
            return self._fail("select_from_pool", "Game is not in progress")

        pooled = self.session.draw_pile.find(piece.id)
        if pooled is None:
            return self._fail("select_from_pool", "Piece is not in the pool")

        return self._toggle_selection("select_from_pool", pooled, from_pool=True)

    def deselect(self) -> ActionResult:
        """Drop the current selection."""
        self.session.clear_selection()
        self._emit(GameEvent.SELECTION_CHANGED, piece=None, from_pool=False)
        return ActionResult.success_result("deselect", ActionResultType.PIECE_DESELECTED, "Piece deselected")

    def rotate(self) -> ActionResult:
        """Rotate the selected piece one step."""
        selection = self.session.selection
        if selection is None:
            return self._fail("rotate", "No piece selected")

        rotated = selection.piece.rotate()
        # Keep the source collection in step so re-selecting shows the same rotation
        if selection.from_pool:
            self.session.draw_pile.replace(rotated)
        else:
            self.session.current_player.replace_piece(rotated)
        self.session.selection = Selection(rotated, selection.from_pool)

        self._emit(GameEvent.SELECTION_CHANGED, piece=rotated, from_pool=selection.from_pool)
        return ActionResult.success_result("rotate", ActionResultType.PIECE_ROTATED, f"Rotated to {rotated}")

    def place(self, row: int, col: int) -> ActionResult:
        """Place the selected piece at (row, col) in the first rotation that fits."""
        if self.session.phase != GamePhase.PLAYING:
            return self._fail("place", "Game is not in progress")

        selection = self.session.selection
        if selection is None:
            return self._fail("place", "No piece selected")

        validation = self.validator.validate_placement(selection.piece, row, col)
        if not validation.is_valid:
            return self._fail("place", validation.message)

        player = self.session.current_player
        is_first_move = self.session.is_first_move

        placed = self.session.board.place(validation.piece, row, col)
        completes_hexagon = game_rules.check_hexagon_completion(row, col, self.session.board)
        points = game_rules.calculate_placement_score(
            placed.piece, is_first_move, validation.matching_edges, completes_hexagon, self.config)

        self.session.total_score += points
        player.add_score(points)

        # Remove piece from its source
        if selection.from_pool:
            self.session.draw_pile.remove(selection.piece)
        else:
            player.remove_piece(selection.piece)

        message = game_rules.get_placement_message(
            placed.piece, points, is_first_move, validation.matching_edges, completes_hexagon, self.config)
        logger.info(f"{player.name}: {message} at ({row}, {col})")

        self.session.clear_selection()
        self._emit(GameEvent.PIECE_PLACED, placed_piece=placed, points=points, message=message, player=player)
        self._emit(GameEvent.SELECTION_CHANGED, piece=None, from_pool=False)

        if player.pieces_remaining == 0:
            if self.config.award_going_out_bonus:
                others = [other for other in self.session.players if other is not player]
                bonus = game_rules.calculate_going_out_bonus(others, self.config)
                player.add_score(bonus)
                self.session.total_score += bonus
                points += bonus
                message += f" (Going out bonus: {bonus})"
            standings = self._end_game(player, GameEndReason.PLAYER_WENT_OUT)
            return ActionResult.success_result("place", ActionResultType.GAME_ENDED, message, points,
                                               placed_piece=placed, standings=standings)

        self._advance_to_next_player()
        return ActionResult.success_result("place", ActionResultType.PIECE_PLACED, message, points,
                                           placed_piece=placed)

    def add_selected_to_rack(self) -> ActionResult:
        """Keep the selected pool piece instead of playing it. Ends the turn."""
        if self.session.phase != GamePhase.PLAYING:
            return self._fail("add_selected_to_rack", "Game is not in progress")

        selection = self.session.selection
        if selection is None:
            return self._fail("add_selected_to_rack", "No piece selected")

        if not selection.from_pool:
            return self._fail("add_selected_to_rack", "Can only add pool pieces to rack")

        player = self.session.current_player
        self.session.draw_pile.remove(selection.piece)
        player.add_piece(selection.piece)
        logger.info(f"{player.name} took {selection.piece} from the pool")

        self.session.clear_selection()
        self._emit(GameEvent.SELECTION_CHANGED, piece=None, from_pool=False)
        self._advance_to_next_player()

        return ActionResult.success_result("add_selected_to_rack", ActionResultType.PIECE_ADDED_TO_RACK,
                                           f"{player.name}: Added piece to rack. Turn ends.")

    # =============================================================================
    # INTERNALS
    # =============================================================================

    def _toggle_selection(self, action_type: str, piece: Piece, from_pool: bool) -> ActionResult:
        current = self.session.selection
        if current is not None and current.piece == piece:
            return self.deselect()

        self.session.selection = Selection(piece, from_pool)
        self._emit(GameEvent.SELECTION_CHANGED, piece=piece, from_pool=from_pool)

        source = "pool" if from_pool else "rack"
        return ActionResult.success_result(action_type, ActionResultType.PIECE_SELECTED,
                                           f"Piece selected from {source}")

    def _place_initial_piece(self) -> Optional[PlacedPiece]:
        """Draw the opening piece and put it in the center, scored as a first move."""
        piece = self.session.draw_pile.draw()
        if piece is None:
            return None

        row, col = self.session.board.center
        placed = self.session.board.place(piece, row, col)
        points = game_rules.calculate_placement_score(placed.piece, True, 0, False, self.config)
        self.session.total_score += points

        self._emit(GameEvent.PIECE_PLACED, placed_piece=placed, points=points,
                   message=f"Initial piece placed: {placed.piece}")
        return placed

    def _deal_pieces(self, player: Player, count: int) -> None:
        for _ in range(count):
            piece = self.session.draw_pile.draw()
            if piece is None:
                break
            player.add_piece(piece)

    def _advance_to_next_player(self) -> None:
        previous, current = self.session.advance_player()
        logger.info(f"{current.name}'s turn")
        self._emit(GameEvent.PLAYER_CHANGED, previous_player=previous, player=current)
        self._emit(GameEvent.SELECTION_CHANGED, piece=None, from_pool=False)

    def _end_game(self, winner: Optional[Player], reason: GameEndReason) -> List[Player]:
        standings = game_rules.rank_players(self.session.players)
        if winner is None and standings:
            winner = standings[0]

        self.session.phase = GamePhase.GAME_OVER
        self.session.clear_selection()
        self.session.winner = winner
        self.session.end_reason = reason
        self.session.standings = standings

        logger.info(f"Game over ({reason.value}): " + ", ".join(f"{p.name}={p.score}" for p in standings))
        self._emit(GameEvent.GAME_ENDED, winner=winner, reason=reason, standings=list(standings))
        self._emit(GameEvent.STATE_CHANGED, phase=GamePhase.GAME_OVER,
                   message=f"{winner.name} wins!" if winner else "Game over!")
        return standings

    def _emit(self, event: GameEvent, **payload) -> None:
        self.event_manager.trigger_event(EventContext(event_type=event, **payload))

    def _fail(self, action_type: str, message: str) -> ActionResult:
        logger.debug(f"{action_type} rejected: {message}")
        return ActionResult.failure_result(action_type, message)
