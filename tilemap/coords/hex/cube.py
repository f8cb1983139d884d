"""Cube hex coordinates. Simpler math than axial, at the cost of a redundant axis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

from .util import cube_distance, cube_round

if TYPE_CHECKING:
    from .axial import AxialCoords


# Unit steps to the six neighbours, counter-clockwise from east.
CUBE_DIRECTIONS: Tuple[Tuple[int, int, int], ...] = (
    (1, -1, 0),
    (1, 0, -1),
    (0, 1, -1),
    (-1, 1, 0),
    (-1, 0, 1),
    (0, -1, 1),
)


@dataclass(frozen=True, slots=True)
class CubeCoords:
    """Cube coordinate triple. ``q + r + s`` must always be zero."""

    q: int
    r: int
    s: int

    def __post_init__(self) -> None:
        if self.q + self.r + self.s != 0:
            raise ValueError(
                f"cube coordinates must sum to zero, got ({self.q}, {self.r}, {self.s})"
            )

    @classmethod
    def from_axial(cls, coords: "AxialCoords") -> "CubeCoords":
        return cls(coords.q, coords.r, -coords.q - coords.r)

    @classmethod
    def from_fractional(cls, q: float, r: float, s: float) -> "CubeCoords":
        """Return the hex containing the fractional cube point ``(q, r, s)``."""
        return cls(*cube_round(q, r, s))

    def to_axial(self) -> "AxialCoords":
        from .axial import AxialCoords

        return AxialCoords(self.q, self.r)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.q, self.r, self.s)

    def adjacent_coords(self) -> List["CubeCoords"]:
        return [self + CubeCoords(dq, dr, ds) for dq, dr, ds in CUBE_DIRECTIONS]

    def distance(self, other: "CubeCoords") -> int:
        return cube_distance(self.as_tuple(), other.as_tuple())

    def __add__(self, other: "CubeCoords") -> "CubeCoords":
        return CubeCoords(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: "CubeCoords") -> "CubeCoords":
        return CubeCoords(self.q - other.q, self.r - other.r, self.s - other.s)


__all__ = ["CubeCoords", "CUBE_DIRECTIONS"]
