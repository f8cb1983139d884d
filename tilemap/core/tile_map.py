from __future__ import annotations

from typing import Any, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

from ..coords.hex.axial import AxialCoords
from ..coords.square import SquareCoords
from ..movement.pathfinding import find_path


C = TypeVar("C")
T = TypeVar("T")


class TileMap(Generic[C, T]):
    """A map of tiles stored at arbitrary coordinates.

    The map is a plain dictionary underneath: no eviction and no locking.
    Searches treat it as read-only, so keep writers away while a
    :class:`~tilemap.movement.pathfinding.Pathfinder` is running.
    """

    def __init__(self) -> None:
        self._tiles: Dict[C, T] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, coords: C) -> Optional[T]:
        """Return the tile at ``coords`` or ``None`` if there is none."""
        return self._tiles.get(coords)

    get_tile = get

    def insert(self, coords: C, tile: T) -> Optional[T]:
        """Store ``tile`` at ``coords`` and return the tile it replaced."""
        previous = self._tiles.get(coords)
        self._tiles[coords] = tile
        return previous

    insert_tile = insert

    def contains_tile_at(self, coords: C) -> bool:
        return coords in self._tiles

    def get_adjacent(self, coords: C) -> List[T]:
        """Return the tiles stored at coordinates adjacent to ``coords``."""
        tiles: List[T] = []
        for adjacent in coords.adjacent_coords():  # type: ignore[attr-defined]
            tile = self._tiles.get(adjacent)
            if tile is not None:
                tiles.append(tile)
        return tiles

    def items(self) -> Iterator[Tuple[C, T]]:
        return iter(self._tiles.items())

    def find_path(self, start: C, end: C, **options: Any) -> Optional[List[C]]:
        """Return the cheapest path from ``start`` to ``end`` on this map.

        See :func:`tilemap.movement.pathfinding.find_path` for ``options``.
        """
        return find_path(self, start, end, **options)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------
    def __contains__(self, coords: object) -> bool:
        return coords in self._tiles

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[C]:
        return iter(self._tiles)


# Tile map using hexagonal coordinates
HexMap = TileMap[AxialCoords, T]
# Tile map using square coordinates
SquareMap = TileMap[SquareCoords, T]


__all__ = ["TileMap", "HexMap", "SquareMap"]
