"""Piece model for Triominos tiles."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple


Edge = Tuple[int, int]


class Orientation(Enum):
    """Which way a triangular tile points."""
    UP = "up"
    DOWN = "down"


class Side(Enum):
    """Sides of a triangular tile."""
    TOP = "top"        # Only valid for pointing-down triangles
    BOTTOM = "bottom"  # Only valid for pointing-up triangles
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, eq=False)
class Piece:
    """A triangular tile with three corner values.

    Pieces are immutable values. Rotating a piece or changing its orientation
    returns a new piece carrying the same id, and two pieces compare equal
    whenever their ids match.
    """
    id: int
    v1: int
    v2: int
    v3: int
    orientation: Orientation = Orientation.UP

    def __post_init__(self) -> None:
        """Validate corner values."""
        for value in self.values:
            if value < 0:
                raise ValueError(f"Corner values must be non-negative: {self.values}")

    @property
    def values(self) -> Tuple[int, int, int]:
        """Corner values in their current order."""
        return (self.v1, self.v2, self.v3)

    @property
    def is_triple(self) -> bool:
        """True when all three corners carry the same value."""
        return self.v1 == self.v2 == self.v3

    @property
    def point_value(self) -> int:
        """Sum of the three corner values."""
        return self.v1 + self.v2 + self.v3

    @property
    def is_pointing_up(self) -> bool:
        return self.orientation is Orientation.UP

    def rotate(self) -> "Piece":
        """Return the piece with its corners shifted one step: (v1, v2, v3) -> (v3, v1, v2)."""
        return replace(self, v1=self.v3, v2=self.v1, v3=self.v2)

    def clone(self) -> "Piece":
        """Return a copy carrying the same id, corners and orientation."""
        return replace(self)

    def oriented(self, orientation: Orientation) -> "Piece":
        """Return the piece pointing the given way."""
        if orientation is self.orientation:
            return self
        return replace(self, orientation=orientation)

    def get_edge(self, side: Side) -> Edge:
        """Get the ordered pair of corner values bounding a side.

        Raises:
            ValueError: If the side does not exist for the current orientation.
        """
        if side is Side.RIGHT:
            return (self.v1, self.v2) if self.is_pointing_up else (self.v2, self.v3)
        if side is Side.LEFT:
            return (self.v3, self.v1)
        if side is Side.BOTTOM and self.is_pointing_up:
            return (self.v2, self.v3)
        if side is Side.TOP and not self.is_pointing_up:
            return (self.v1, self.v2)
        raise ValueError(f"Invalid side {side.value} for a piece pointing {self.orientation.value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"[{self.v1}-{self.v2}-{self.v3}]"
