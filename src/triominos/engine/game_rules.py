"""Placement validation, bonus detection and scoring for Triominos.

Everything in this module is a pure function of its arguments: nothing here
mutates the board or the pieces handed in. Pieces are re-oriented and rotated
by building new values.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from ..models.board import Board, PlacedPiece, Position, is_pointing_up
from ..models.piece import Edge, Piece
from ..models.player import Player
from ..utils.logging_config import get_game_logger
from .rules_config import DEFAULT_RULES, RuleConfig

logger = get_game_logger(__name__)

__all__ = [
    "PlacementValidationResult",
    "is_pointing_up",
    "edges_match",
    "rotations",
    "calculate_base_score",
    "calculate_placement_score",
    "calculate_going_out_bonus",
    "get_placement_message",
    "validate_placement",
    "find_valid_rotation",
    "check_hexagon_completion",
    "get_valid_placements",
    "has_any_valid_placement",
    "rank_players",
]


@dataclass(frozen=True)
class PlacementValidationResult:
    """Outcome of checking a single placement."""
    is_valid: bool
    message: str
    matching_edges: int = 0
    piece: Optional[Piece] = None  # The piece as it would sit on the board

    @classmethod
    def valid(cls, matching_edges: int, piece: Piece) -> "PlacementValidationResult":
        return cls(True, "Valid placement", matching_edges, piece)

    @classmethod
    def failed(cls, message: str) -> "PlacementValidationResult":
        return cls(False, message)


def edges_match(edge1: Edge, edge2: Edge) -> bool:
    """Two facing edges match when one is the other reversed."""
    return edge1[0] == edge2[1] and edge1[1] == edge2[0]


def rotations(piece: Piece) -> List[Piece]:
    """The three corner orderings of a piece, starting with the piece as given."""
    once = piece.rotate()
    return [piece, once, once.rotate()]


def calculate_base_score(piece: Piece) -> int:
    return piece.v1 + piece.v2 + piece.v3


def calculate_placement_score(piece: Piece, is_first_move: bool, matching_edges: int,
                              completes_hexagon: bool, config: RuleConfig = DEFAULT_RULES) -> int:
    """Score a placement. All applicable bonuses stack."""
    points = calculate_base_score(piece)

    # First move triple bonus
    if is_first_move and piece.is_triple:
        points += config.first_move_triple_bonus

    # Bridge bonus for touching several edges at once
    if matching_edges >= config.bridge_min_edges:
        points += config.bridge_bonus

    if completes_hexagon:
        points += config.hexagon_bonus

    return points


def calculate_going_out_bonus(other_players: Iterable[Player], config: RuleConfig = DEFAULT_RULES) -> int:
    """Bonus for emptying the rack: a flat bonus plus everything the others still hold."""
    return config.going_out_bonus + sum(player.rack_value for player in other_players)


def get_placement_message(piece: Piece, points: int, is_first_move: bool, matching_edges: int,
                          completes_hexagon: bool, config: RuleConfig = DEFAULT_RULES) -> str:
    """Describe a placement, naming only the highest-priority bonus."""
    message = f"Placed {piece} for {points} points"

    if is_first_move and piece.is_triple:
        message += " (Triple bonus!)"
    elif completes_hexagon:
        message += " (Hexagon bonus!)"
    elif matching_edges >= config.bridge_min_edges:
        message += " (Bridge bonus!)"

    return message


def validate_placement(piece: Piece, row: int, col: int, board: Board,
                       is_first_move: bool) -> PlacementValidationResult:
    """Check whether a piece, with its corners in their current order, fits at (row, col).

    The piece is oriented to the cell before anything else is checked. Every
    occupied neighbor must present a matching edge; a single mismatch fails
    the whole placement.
    """
    candidate = PlacedPiece(piece, row, col)

    if board.is_occupied(row, col):
        return PlacementValidationResult.failed("Cell is already occupied")

    if is_first_move:
        return PlacementValidationResult.valid(0, candidate.piece)

    matching_edges = 0
    has_adjacent_piece = False

    for adj_row, adj_col in candidate.adjacent_positions():
        neighbor = board.get_piece_at(adj_row, adj_col)
        if neighbor is None:
            continue

        has_adjacent_piece = True

        this_edge = candidate.edge_facing(adj_row, adj_col)
        other_edge = neighbor.edge_facing(row, col)

        if not edges_match(this_edge, other_edge):
            return PlacementValidationResult.failed(
                f"Edge mismatch! Your edge [{this_edge[0]}-{this_edge[1]}] "
                f"doesn't match [{other_edge[0]}-{other_edge[1]}]"
            )
        matching_edges += 1

    if not has_adjacent_piece:
        return PlacementValidationResult.failed("Piece must be placed adjacent to an existing piece")

    return PlacementValidationResult.valid(matching_edges, candidate.piece)


def find_valid_rotation(piece: Piece, row: int, col: int, board: Board,
                        is_first_move: bool) -> PlacementValidationResult:
    """Try each rotation of a piece at (row, col) and keep the first that fits.

    When no rotation fits, the failure reported is the one for the piece as given.
    """
    first_failure = None
    for candidate in rotations(piece):
        result = validate_placement(candidate, row, col, board, is_first_move)
        if result.is_valid:
            return result
        if first_failure is None:
            first_failure = result

    logger.debug(f"No rotation of {piece} fits at ({row}, {col}): {first_failure.message}")
    return first_failure


def _hexagon_anchors(row: int, col: int) -> List[Position]:
    return [(row, col), (row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)]


def _is_hexagon_complete(center_row: int, center_col: int, board: Board) -> bool:
    positions = [
        (center_row, center_col),
        (center_row, center_col - 1),
        (center_row, center_col + 1),
        (center_row - 1, center_col),
        (center_row - 1, center_col - 1),
        (center_row - 1, center_col + 1),
    ]
    return all(board.is_occupied(r, c) for r, c in positions)


def check_hexagon_completion(row: int, col: int, board: Board) -> bool:
    """Check whether the piece at (row, col) closed a hexagon around any nearby anchor."""
    return any(_is_hexagon_complete(r, c, board) for r, c in _hexagon_anchors(row, col))


def get_valid_placements(piece: Piece, board: Board) -> Iterator[Position]:
    """Lazily yield every cell where some rotation of the piece fits.

    On an empty board the only candidate is the center cell.
    """
    if board.pieces_placed == 0:
        yield board.center
        return

    checked = set()

    for placed in board.placed_pieces:
        for adj in placed.adjacent_positions():
            if adj in checked or board.is_occupied(*adj):
                continue
            if not board.is_valid_position(*adj):
                continue

            checked.add(adj)

            result = find_valid_rotation(piece, adj[0], adj[1], board, False)
            if result.is_valid:
                yield adj


def has_any_valid_placement(pieces: Iterable[Piece], board: Board) -> bool:
    """Check whether at least one of the pieces can go somewhere on the board."""
    for piece in pieces:
        if next(get_valid_placements(piece, board), None) is not None:
            return True
    return False


def rank_players(players: Iterable[Player]) -> List[Player]:
    """Players by descending score; ties keep seat order."""
    return sorted(players, key=lambda player: -player.score)

