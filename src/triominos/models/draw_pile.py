"""Draw pile (pool) model for Triominos."""

import random
from typing import Iterator, List, Optional

from .piece import Piece


class DrawPile:
    """The shared reserve of pieces that have not been dealt or played.

    Pieces are drawn from the end of the pile. The random source is injected
    so tests can shuffle deterministically.
    """

    def __init__(self, rng: Optional[random.Random] = None, min_value: int = 0, max_value: int = 5):
        if min_value < 0 or min_value > max_value:
            raise ValueError(f"Invalid piece value range: {min_value}..{max_value}")
        self.rng = rng if rng is not None else random.Random()
        self.min_value = min_value
        self.max_value = max_value
        self._pieces: List[Piece] = []

    @staticmethod
    def generate_all(min_value: int = 0, max_value: int = 5) -> List[Piece]:
        """Build every distinct piece, one per non-decreasing triple i <= j <= k.

        Ids are assigned sequentially in enumeration order.
        """
        pieces = []
        piece_id = 0
        for i in range(min_value, max_value + 1):
            for j in range(i, max_value + 1):
                for k in range(j, max_value + 1):
                    pieces.append(Piece(piece_id, i, j, k))
                    piece_id += 1
        return pieces

    def initialize(self) -> None:
        """Refill the pile with a full set of pieces and shuffle it."""
        self._pieces = self.generate_all(self.min_value, self.max_value)
        self.shuffle()

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the pile in place (Fisher-Yates)."""
        rng = rng if rng is not None else self.rng
        n = len(self._pieces)
        while n > 1:
            n -= 1
            k = rng.randrange(n + 1)
            self._pieces[k], self._pieces[n] = self._pieces[n], self._pieces[k]

    def draw(self) -> Optional[Piece]:
        """Remove and return the last piece, or None if the pile is empty."""
        if not self._pieces:
            return None
        return self._pieces.pop()

    def remove(self, piece: Piece) -> bool:
        """Remove a piece by id. Returns True if it was in the pile."""
        for index, candidate in enumerate(self._pieces):
            if candidate.id == piece.id:
                del self._pieces[index]
                return True
        return False

    def replace(self, piece: Piece) -> bool:
        """Swap in a new value for the piece with the same id."""
        for index, candidate in enumerate(self._pieces):
            if candidate.id == piece.id:
                self._pieces[index] = piece
                return True
        return False

    def find(self, piece_id: int) -> Optional[Piece]:
        """Find a piece in the pile by id."""
        for piece in self._pieces:
            if piece.id == piece_id:
                return piece
        return None

    def clear(self) -> None:
        self._pieces.clear()

    @property
    def pieces(self) -> List[Piece]:
        """Copy of the pile contents, bottom first."""
        return list(self._pieces)

    @property
    def count(self) -> int:
        return len(self._pieces)

    @property
    def has_pieces(self) -> bool:
        return bool(self._pieces)

    def __contains__(self, piece: object) -> bool:
        return piece in self._pieces

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._pieces))

    def __len__(self) -> int:
        return len(self._pieces)

    def __str__(self) -> str:
        return f"Draw pile ({self.count} pieces)"
