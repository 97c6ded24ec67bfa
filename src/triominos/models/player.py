"""Player model for Triominos."""

from dataclasses import dataclass, field
from typing import List, Optional

from .piece import Piece


@dataclass
class Player:
    """A player with a score and a rack of held pieces."""
    id: int
    name: str

    # Resources
    score: int = 0
    rack: List[Piece] = field(default_factory=list)

    # Turn state
    is_current_player: bool = False

    @property
    def pieces_remaining(self) -> int:
        """Number of pieces left in the rack."""
        return len(self.rack)

    @property
    def rack_value(self) -> int:
        """Total point value of the pieces in the rack."""
        return sum(piece.point_value for piece in self.rack)

    def has_piece(self, piece: Piece) -> bool:
        """Check whether the rack holds a piece with the same id."""
        return piece in self.rack

    def find_piece(self, piece_id: int) -> Optional[Piece]:
        """Find a rack piece by id."""
        for piece in self.rack:
            if piece.id == piece_id:
                return piece
        return None

    def add_piece(self, piece: Piece) -> None:
        self.rack.append(piece)

    def remove_piece(self, piece: Piece) -> bool:
        """Remove a piece from the rack. Returns True if it was held."""
        if piece not in self.rack:
            return False
        self.rack.remove(piece)
        return True

    def replace_piece(self, piece: Piece) -> bool:
        """Swap in a new value (e.g. a rotation) for the held piece with the same id."""
        for index, held in enumerate(self.rack):
            if held.id == piece.id:
                self.rack[index] = piece
                return True
        return False

    def clear_rack(self) -> None:
        self.rack.clear()

    def add_score(self, points: int) -> None:
        """Add points to the player's score."""
        if points < 0:
            raise ValueError(f"Score can only increase, got {points}")
        self.score += points

    def reset_score(self) -> None:
        self.score = 0

    def __str__(self) -> str:
        return f"{self.name} (Score: {self.score}, Pieces: {self.pieces_remaining})"
