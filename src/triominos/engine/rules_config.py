"""Rule constants for a Triominos game."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleConfig:
    """All tunable rule values, built once and handed to the engine.

    The defaults describe the standard game. Variants (a different hexagon
    bonus, a smaller board, going-out bonuses) are expressed by building a
    different config.
    """
    # Players
    min_players: int = 1
    max_players: int = 4
    pieces_per_player: int = 7

    # Piece set
    min_piece_value: int = 0
    max_piece_value: int = 5

    # Board
    board_rows: int = 12
    board_cols: int = 24

    # Scoring
    first_move_triple_bonus: int = 10
    bridge_bonus: int = 40
    bridge_min_edges: int = 2
    hexagon_bonus: int = 50
    going_out_bonus: int = 25

    # Optional rule variants
    award_going_out_bonus: bool = False
    end_when_blocked: bool = False

    def __post_init__(self) -> None:
        self.validate()

    @property
    def total_pieces(self) -> int:
        """Number of distinct pieces: non-decreasing triples over the value range."""
        n = self.max_piece_value - self.min_piece_value + 1
        return n * (n + 1) * (n + 2) // 6

    def is_valid_player_count(self, count: int) -> bool:
        return self.min_players <= count <= self.max_players

    def validate(self) -> None:
        """Check the config for internal consistency.

        Raises:
            ValueError: If any value is out of range.
        """
        if self.board_rows <= 0 or self.board_cols <= 0:
            raise ValueError(f"Board dimensions must be positive: {self.board_rows}x{self.board_cols}")
        if self.min_players < 1 or self.min_players > self.max_players:
            raise ValueError(f"Invalid player range: {self.min_players}..{self.max_players}")
        if self.min_piece_value < 0 or self.min_piece_value > self.max_piece_value:
            raise ValueError(f"Invalid piece value range: {self.min_piece_value}..{self.max_piece_value}")
        if self.pieces_per_player < 1:
            raise ValueError(f"Pieces per player must be positive: {self.pieces_per_player}")
        bonuses = (self.first_move_triple_bonus, self.bridge_bonus, self.hexagon_bonus, self.going_out_bonus)
        if any(bonus < 0 for bonus in bonuses):
            raise ValueError("Bonuses cannot be negative")


DEFAULT_RULES = RuleConfig()
