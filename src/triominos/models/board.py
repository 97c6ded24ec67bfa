"""Board model for the triangular Triominos grid.

Cells alternate between pointing up and pointing down. A cell at (row, col)
points up when (row + col) is even. Every cell has a left and a right
neighbor in its own row; an up cell also touches the cell below it and a
down cell touches the cell above it.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .piece import Edge, Orientation, Piece, Side


Position = Tuple[int, int]


def is_pointing_up(row: int, col: int) -> bool:
    """Check whether the cell at (row, col) points up."""
    return (row + col) % 2 == 0


def orientation_at(row: int, col: int) -> Orientation:
    """Orientation forced on any piece placed at (row, col)."""
    return Orientation.UP if is_pointing_up(row, col) else Orientation.DOWN


def adjacent_positions(row: int, col: int) -> List[Position]:
    """Get the 3 cells sharing a side with (row, col)."""
    if is_pointing_up(row, col):
        # Left, right, below
        return [(row, col - 1), (row, col + 1), (row + 1, col)]
    # Left, right, above
    return [(row, col - 1), (row, col + 1), (row - 1, col)]


def side_facing(row: int, col: int, adj_row: int, adj_col: int) -> Side:
    """Get the side of the cell at (row, col) that faces (adj_row, adj_col).

    Raises:
        ValueError: If the two cells do not share a side.
    """
    if (adj_row, adj_col) not in adjacent_positions(row, col):
        raise ValueError(f"({adj_row}, {adj_col}) is not adjacent to ({row}, {col})")
    if adj_col < col:
        return Side.LEFT
    if adj_col > col:
        return Side.RIGHT
    return Side.BOTTOM if adj_row > row else Side.TOP


@dataclass(frozen=True)
class PlacedPiece:
    """A piece bound to a board cell. Its orientation always follows the cell."""
    piece: Piece
    row: int
    col: int

    def __post_init__(self) -> None:
        """Force the piece orientation to match the cell parity."""
        object.__setattr__(self, "piece", self.piece.oriented(orientation_at(self.row, self.col)))

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def is_pointing_up(self) -> bool:
        return self.piece.is_pointing_up

    def adjacent_positions(self) -> List[Position]:
        """Get the cells sharing a side with this piece."""
        return adjacent_positions(self.row, self.col)

    def edge_facing(self, adj_row: int, adj_col: int) -> Edge:
        """Get the edge of this piece that faces an adjacent cell."""
        return self.piece.get_edge(side_facing(self.row, self.col, adj_row, adj_col))

    def __str__(self) -> str:
        return f"{self.piece} at ({self.row}, {self.col})"


class Board:
    """Sparse bounded grid of placed pieces."""

    def __init__(self, rows: int = 12, cols: int = 24):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells: Dict[Position, PlacedPiece] = {}
        self._placed: List[PlacedPiece] = []

    @property
    def pieces_placed(self) -> int:
        """Number of pieces on the board."""
        return len(self._cells)

    @property
    def is_empty(self) -> bool:
        return not self._cells

    @property
    def center(self) -> Position:
        """The cell where the opening piece goes."""
        return (self.rows // 2, self.cols // 2)

    @property
    def placed_pieces(self) -> List[PlacedPiece]:
        """Placed pieces in the order they were placed."""
        return list(self._placed)

    def occupied_positions(self) -> Iterator[Position]:
        """Iterate over the occupied cells."""
        return iter(list(self._cells))

    def is_occupied(self, row: int, col: int) -> bool:
        return (row, col) in self._cells

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check that (row, col) lies inside the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_piece_at(self, row: int, col: int) -> Optional[PlacedPiece]:
        return self._cells.get((row, col))

    def place(self, piece: Piece, row: int, col: int) -> PlacedPiece:
        """Put a piece on the board.

        No rule is checked here; callers validate the placement first.
        """
        placed = PlacedPiece(piece, row, col)
        self._cells[(row, col)] = placed
        self._placed.append(placed)
        return placed

    def adjacent_positions(self, row: int, col: int) -> List[Position]:
        """Get the cells sharing a side with (row, col)."""
        return adjacent_positions(row, col)

    def edge_facing(self, row: int, col: int, adj_row: int, adj_col: int) -> Edge:
        """Get the edge of the piece at (row, col) that faces (adj_row, adj_col).

        Raises:
            ValueError: If (row, col) is empty or the cells are not adjacent.
        """
        placed = self.get_piece_at(row, col)
        if placed is None:
            raise ValueError(f"No piece at ({row}, {col})")
        return placed.edge_facing(adj_row, adj_col)

    def clear(self) -> None:
        """Remove every piece from the board."""
        self._cells.clear()
        self._placed.clear()

    def __len__(self) -> int:
        return len(self._cells)

    def __str__(self) -> str:
        return f"Board {self.rows}x{self.cols} ({self.pieces_placed} pieces placed)"
