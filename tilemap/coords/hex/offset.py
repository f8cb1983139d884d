"""Offset hex coordinates. The simple way to lay out pseudo-rectangular maps.

Uses the "odd-r" layout: pointy-top hexes where every odd row is shoved half
a hex to the right. Neighbour offsets therefore depend on row parity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .axial import AxialCoords
from .cube import CubeCoords


# (dcol, drow) per row parity: index 0 for even rows, 1 for odd rows.
ODD_R_DIRECTIONS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((1, 0), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1)),
    ((1, 0), (1, -1), (0, -1), (-1, 0), (0, 1), (1, 1)),
)


@dataclass(frozen=True, slots=True)
class OffsetCoords:
    """Offset coordinate pair."""

    col: int
    row: int

    @classmethod
    def splat(cls, val: int) -> "OffsetCoords":
        return cls(val, val)

    @classmethod
    def from_axial(cls, coords: AxialCoords) -> "OffsetCoords":
        col = coords.q + (coords.r - (coords.r & 1)) // 2
        return cls(col, coords.r)

    @classmethod
    def from_cube(cls, coords: CubeCoords) -> "OffsetCoords":
        return cls.from_axial(coords.to_axial())

    def to_axial(self) -> AxialCoords:
        q = self.col - (self.row - (self.row & 1)) // 2
        return AxialCoords(q, self.row)

    def to_cube(self) -> CubeCoords:
        return self.to_axial().to_cube()

    def adjacent_coords(self) -> List["OffsetCoords"]:
        directions = ODD_R_DIRECTIONS[self.row & 1]
        return [OffsetCoords(self.col + dc, self.row + dr) for dc, dr in directions]

    def distance(self, other: "OffsetCoords") -> int:
        return self.to_axial().distance(other.to_axial())

    def __add__(self, other: "OffsetCoords") -> "OffsetCoords":
        return OffsetCoords(self.col + other.col, self.row + other.row)

    def __sub__(self, other: "OffsetCoords") -> "OffsetCoords":
        return OffsetCoords(self.col - other.col, self.row - other.row)


__all__ = ["OffsetCoords", "ODD_R_DIRECTIONS"]
