"""Doubled hex coordinates.

Pseudo-rectangular like offset coordinates, but the neighbour offsets are
constant. This is the "double-width" layout: horizontal steps move two
columns, so ``col + row`` is always even.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .axial import AxialCoords
from .cube import CubeCoords


DOUBLED_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (2, 0),
    (1, -1),
    (-1, -1),
    (-2, 0),
    (-1, 1),
    (1, 1),
)


@dataclass(frozen=True, slots=True)
class DoubledCoords:
    """Doubled coordinate pair (column, row)."""

    col: int
    row: int

    def __post_init__(self) -> None:
        if (self.col + self.row) % 2 != 0:
            raise ValueError(
                f"doubled coordinates need an even col + row, got ({self.col}, {self.row})"
            )

    @classmethod
    def splat(cls, val: int) -> "DoubledCoords":
        return cls(val, val)

    @classmethod
    def from_axial(cls, coords: AxialCoords) -> "DoubledCoords":
        return cls(2 * coords.q + coords.r, coords.r)

    @classmethod
    def from_cube(cls, coords: CubeCoords) -> "DoubledCoords":
        return cls.from_axial(coords.to_axial())

    def to_axial(self) -> AxialCoords:
        return AxialCoords((self.col - self.row) // 2, self.row)

    def to_cube(self) -> CubeCoords:
        return self.to_axial().to_cube()

    def adjacent_coords(self) -> List["DoubledCoords"]:
        return [DoubledCoords(self.col + dc, self.row + dr) for dc, dr in DOUBLED_DIRECTIONS]

    def distance(self, other: "DoubledCoords") -> int:
        dcol = abs(self.col - other.col)
        drow = abs(self.row - other.row)
        return drow + max(0, (dcol - drow) // 2)

    def __add__(self, other: "DoubledCoords") -> "DoubledCoords":
        return DoubledCoords(self.col + other.col, self.row + other.row)

    def __sub__(self, other: "DoubledCoords") -> "DoubledCoords":
        return DoubledCoords(self.col - other.col, self.row - other.row)


__all__ = ["DoubledCoords", "DOUBLED_DIRECTIONS"]
