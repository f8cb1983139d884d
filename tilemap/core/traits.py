"""Capability interfaces that make the tile systems generic.

Implement :class:`TileCoords` to add a coordinate system and subclass
:class:`Tile` (or just provide ``pathfind_cost``) to add a tile type.
"""

from __future__ import annotations

from typing import Any, List, Protocol, runtime_checkable

DEFAULT_PATHFIND_COST = 1


@runtime_checkable
class TileCoords(Protocol):
    """A hashable grid coordinate that knows its neighbours."""

    def adjacent_coords(self) -> List[Any]:
        """Return the coordinates sharing an edge or corner with this one."""
        ...

    def distance(self, other: Any) -> int:
        """Return the number of steps between this coordinate and ``other``."""
        ...


class Tile:
    """Base class for map tiles.

    Subclasses override :meth:`pathfind_cost` to make a tile cheaper or more
    expensive to enter. Costs must be non-negative; negative values break the
    shortest path guarantee of the pathfinder and are not checked.
    """

    def pathfind_cost(self) -> int:
        """Return the cost of moving onto this tile."""
        return DEFAULT_PATHFIND_COST


def tile_cost(tile: Any) -> int:
    """Return ``tile.pathfind_cost()`` or the default for plain objects."""

    cost_fn = getattr(tile, "pathfind_cost", None)
    if cost_fn is None:
        return DEFAULT_PATHFIND_COST
    return cost_fn()


__all__ = ["TileCoords", "Tile", "tile_cost", "DEFAULT_PATHFIND_COST"]
