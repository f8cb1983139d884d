"""Minimum-cost pathfinding over tile maps.

The search is a uniform-cost (Dijkstra) search over the implicit graph of a
:class:`~tilemap.core.tile_map.TileMap`. Moving onto a tile costs that tile's
``pathfind_cost()``; coordinates with no tile are impassable. The pathfinder
only needs ``adjacent_coords()`` plus hashing and equality from coordinates,
so it works unchanged for hex, square or custom grids.
"""

from __future__ import annotations

from dataclasses import dataclass
from heapq import heappop, heappush
from itertools import count
from typing import Any, Callable, Dict, Generic, List, Optional, Sequence, Set, Tuple, TypeVar
import logging

from ..config import CONFIG
from ..core.traits import TileCoords, tile_cost

logger = logging.getLogger(__name__)


C = TypeVar("C", bound=TileCoords)

# Marks keyword arguments left out so they fall back to CONFIG.
_UNSET: Any = object()


class SearchCancelled(RuntimeError):
    """Raised when a search is stopped before it could finish."""


@dataclass
class PathfindNode(Generic[C]):
    """Best route found so far to one coordinate."""

    total_cost: int
    from_coords: Optional[C] = None


class Pathfinder(Generic[C]):
    """Reusable search engine; state is reset at the start of each search.

    Parameters
    ----------
    require_start_tile:
        When true, a start coordinate with no tile yields ``None`` instead of
        being searched from, unless it is also the end. Defaults to the
        configured value.
    max_expansions:
        Maximum number of coordinates finalized per search before
        :class:`SearchCancelled` is raised. ``None`` means unlimited; leave
        it out to use the configured value.
    should_cancel:
        Zero-argument callable polled once per expansion; returning true
        raises :class:`SearchCancelled`.
    """

    def __init__(
        self,
        *,
        require_start_tile: Any = _UNSET,
        max_expansions: Any = _UNSET,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> None:
        cfg = CONFIG.pathfinding
        self.require_start_tile: bool = (
            cfg.require_start_tile if require_start_tile is _UNSET else bool(require_start_tile)
        )
        self.max_expansions: Optional[int] = (
            cfg.max_expansions if max_expansions is _UNSET else max_expansions
        )
        self.should_cancel = should_cancel

        self.frontier: Set[C] = set()
        self.finalized: Set[C] = set()
        self.nodes: Dict[C, PathfindNode[C]] = {}
        self._heap: List[Tuple[int, int, C]] = []
        self._tiebreak = count()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def find_path(self, grid: Any, start: C, end: C) -> Optional[List[C]]:
        """Return the cheapest path from ``start`` to ``end``, both inclusive.

        ``grid`` only needs a ``get(coords)`` method returning a tile or
        ``None``; it is never modified. Returns ``None`` when ``end`` cannot
        be reached. Among several equally cheap paths the first one found
        wins.
        """

        self._reset(start)
        logger.debug("Searching for path from %s to %s", start, end)

        if self.require_start_tile and start != end and grid.get(start) is None:
            logger.debug("No tile at start %s; not searching", start)
            return None

        current: Optional[C] = start
        expansions = 0
        while current is not None:
            if current == end:
                path = self._reconstruct(end)
                logger.debug(
                    "Found path of %d coords (cost %s) after %d expansions",
                    len(path), self.nodes[end].total_cost, expansions,
                )
                return path

            if self.should_cancel is not None and self.should_cancel():
                logger.debug("Search from %s to %s cancelled", start, end)
                raise SearchCancelled(f"search from {start} to {end} was cancelled")
            if self.max_expansions is not None and expansions >= self.max_expansions:
                logger.debug(
                    "Search from %s to %s hit the %d expansion limit",
                    start, end, self.max_expansions,
                )
                raise SearchCancelled(
                    f"search from {start} to {end} exceeded {self.max_expansions} expansions"
                )

            self._expand(grid, current)
            expansions += 1
            current = self._pop_cheapest()

        logger.debug("Frontier exhausted; no path from %s to %s", start, end)
        return None

    @staticmethod
    def path_cost(grid: Any, path: Sequence[C]) -> int:
        """Return the cost of walking ``path`` on ``grid``.

        The start tile is free; every later step costs the tile entered.
        """

        total = 0
        for coords in path[1:]:
            tile = grid.get(coords)
            if tile is None:
                raise ValueError(f"no tile at {coords}")
            total += tile_cost(tile)
        return total

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _reset(self, start: C) -> None:
        self.frontier = set()
        self.finalized = set()
        self.nodes = {start: PathfindNode(total_cost=0)}
        self._heap = []
        self._tiebreak = count()

    def _expand(self, grid: Any, current: C) -> None:
        """Finalize ``current`` and relax every passable neighbour."""

        self.frontier.discard(current)
        self.finalized.add(current)
        current_cost = self.nodes[current].total_cost

        for adjacent in current.adjacent_coords():
            tile = grid.get(adjacent)
            if tile is None:
                continue
            # Finalized coordinates are never reopened. This is only correct
            # because tile costs are non-negative.
            if adjacent in self.finalized:
                continue

            candidate = current_cost + tile_cost(tile)
            node = self.nodes.get(adjacent)
            if node is None:
                self.nodes[adjacent] = PathfindNode(candidate, current)
                self.frontier.add(adjacent)
            elif candidate < node.total_cost:
                node.total_cost = candidate
                node.from_coords = current
            else:
                continue
            heappush(self._heap, (candidate, next(self._tiebreak), adjacent))

    def _pop_cheapest(self) -> Optional[C]:
        """Return the cheapest frontier coordinate, skipping stale heap entries."""

        while self._heap:
            cost, _, coords = heappop(self._heap)
            if coords not in self.frontier:
                continue
            if cost != self.nodes[coords].total_cost:
                continue
            return coords

        assert not self.frontier, "frontier coordinates missing from the heap"
        return None

    def _reconstruct(self, end: C) -> List[C]:
        path = [end]
        node = self.nodes[end]
        while node.from_coords is not None:
            path.append(node.from_coords)
            node = self.nodes[node.from_coords]
            assert len(path) <= len(self.nodes), "predecessor chain has a cycle"
        path.reverse()
        return path


def find_path(grid: Any, start: C, end: C, **options: Any) -> Optional[List[C]]:
    """Return the cheapest path from ``start`` to ``end`` on ``grid``.

    ``options`` are passed to :class:`Pathfinder`.
    """

    return Pathfinder(**options).find_path(grid, start, end)


__all__ = ["PathfindNode", "Pathfinder", "SearchCancelled", "find_path"]
