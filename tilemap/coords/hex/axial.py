"""Axial hex coordinates. More compact than cube but the math is a bit of a pain."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .cube import CubeCoords


AXIAL_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (0, -1),
    (1, -1),
)


@dataclass(frozen=True, slots=True)
class AxialCoords:
    """Axial coordinate pair; ``s`` is implied as ``-q - r``."""

    q: int
    r: int

    @classmethod
    def splat(cls, val: int) -> "AxialCoords":
        """Return a coordinate with both axes set to ``val``."""
        return cls(val, val)

    @classmethod
    def from_cube(cls, coords: CubeCoords) -> "AxialCoords":
        return cls(coords.q, coords.r)

    @property
    def s(self) -> int:
        return -self.q - self.r

    def to_cube(self) -> CubeCoords:
        return CubeCoords.from_axial(self)

    def adjacent_coords(self) -> List["AxialCoords"]:
        return [AxialCoords(self.q + dq, self.r + dr) for dq, dr in AXIAL_DIRECTIONS]

    def distance(self, other: "AxialCoords") -> int:
        return max(abs(self.q - other.q), abs(self.r - other.r), abs(self.s - other.s))

    def __add__(self, other: "AxialCoords") -> "AxialCoords":
        return AxialCoords(self.q + other.q, self.r + other.r)

    def __sub__(self, other: "AxialCoords") -> "AxialCoords":
        return AxialCoords(self.q - other.q, self.r - other.r)


__all__ = ["AxialCoords", "AXIAL_DIRECTIONS"]
