"""Shared tile types and map builders for the test suite."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Iterable, List

from tilemap.coords.hex.axial import AxialCoords
from tilemap.core.tile_map import TileMap
from tilemap.core.traits import Tile


@dataclass(frozen=True)
class CostTile(Tile):
    """Tile with an explicit movement cost."""

    cost: int = 1

    def pathfind_cost(self) -> int:
        return self.cost


def hex_area(radius: int, center: AxialCoords = AxialCoords(0, 0)) -> List[AxialCoords]:
    """All axial coordinates within ``radius`` steps of ``center``."""
    area = []
    for dq, dr in product(range(-radius, radius + 1), repeat=2):
        coords = AxialCoords(center.q + dq, center.r + dr)
        if coords.distance(center) <= radius:
            area.append(coords)
    return area


def build_map(coords: Iterable, cost: int = 1) -> TileMap:
    """Return a map with a :class:`CostTile` of ``cost`` at every coordinate."""
    tile_map: TileMap = TileMap()
    for c in coords:
        tile_map.insert(c, CostTile(cost))
    return tile_map


__all__ = ["CostTile", "hex_area", "build_map"]
