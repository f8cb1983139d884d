"""Square grid coordinates.

Every tile has equal width and height and eight neighbours: four sharing a
side and four sharing only a corner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


SIDE_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))
CORNER_DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 1), (-1, 1), (-1, -1), (1, -1))


@dataclass(frozen=True, slots=True)
class SquareCoords:
    """Square grid coordinate pair."""

    x: int
    y: int

    @classmethod
    def splat(cls, val: int) -> "SquareCoords":
        return cls(val, val)

    def side_coords(self) -> List["SquareCoords"]:
        """Return the four neighbours that share an edge."""
        return [SquareCoords(self.x + dx, self.y + dy) for dx, dy in SIDE_DIRECTIONS]

    def adjacent_coords(self) -> List["SquareCoords"]:
        """Return all eight neighbours, side neighbours first."""
        corners = [SquareCoords(self.x + dx, self.y + dy) for dx, dy in CORNER_DIRECTIONS]
        return self.side_coords() + corners

    def distance(self, other: "SquareCoords") -> int:
        """Return the number of king moves between the two tiles."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def __add__(self, other: "SquareCoords") -> "SquareCoords":
        return SquareCoords(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "SquareCoords") -> "SquareCoords":
        return SquareCoords(self.x - other.x, self.y - other.y)


__all__ = ["SquareCoords", "SIDE_DIRECTIONS", "CORNER_DIRECTIONS"]
