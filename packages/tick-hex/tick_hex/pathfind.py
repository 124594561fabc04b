"""A* pathfinding over a hex Grid."""
from __future__ import annotations

import heapq
import logging
from typing import Callable, Sequence

from tick_hex.coord import distance
from tick_hex.neighbors import get_neighbors
from tick_hex.types import CubeCoord, Grid

log = logging.getLogger(__name__)

Heuristic = Callable[[CubeCoord, CubeCoord], float]
CostFn = Callable[[CubeCoord, CubeCoord], float]


def _uniform_cost(a: CubeCoord, b: CubeCoord) -> float:
    return 1


def find_path(
    grid: Grid,
    start: CubeCoord,
    end: CubeCoord,
    heuristic: Heuristic | None = None,
    cost: CostFn | None = None,
) -> list[CubeCoord] | None:
    """Shortest passable path from ``start`` to ``end``, inclusive.

    ``heuristic`` defaults to hex distance and ``cost`` to 1 per step. The
    result is optimal for non-negative costs with a consistent heuristic.
    Returns None when ``end`` cannot be reached.
    """
    if start == end:
        return [start]
    if heuristic is None:
        heuristic = distance
    if cost is None:
        cost = _uniform_cost

    open_set: list[tuple[float, int, float, CubeCoord]] = [(0, 0, 0, start)]
    came_from: dict[CubeCoord, CubeCoord] = {}
    g_score: dict[CubeCoord, float] = {start: 0}
    counter = 1
    expanded = 0

    while open_set:
        _, _, g, current = heapq.heappop(open_set)
        # Entries superseded by a cheaper route are skipped.
        if g > g_score[current]:
            continue
        if current == end:
            log.debug("find_path: %s -> %s found after %d expansions", start, end, expanded)
            return _reconstruct(came_from, start, end)
        expanded += 1

        for n in get_neighbors(grid, current, passable_only=True):
            tentative = g_score[current] + cost(current, n)
            if n not in g_score or tentative < g_score[n]:
                g_score[n] = tentative
                came_from[n] = current
                heapq.heappush(
                    open_set, (tentative + heuristic(n, end), counter, tentative, n)
                )
                counter += 1

    log.debug("find_path: %s -> %s unreachable after %d expansions", start, end, expanded)
    return None


def _reconstruct(
    came_from: dict[CubeCoord, CubeCoord], start: CubeCoord, end: CubeCoord
) -> list[CubeCoord]:
    path = [end]
    current = end
    while current != start:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def get_path_cost(path: Sequence[CubeCoord], cost: CostFn | None = None) -> float:
    """Sum of step costs along ``path``. Zero for paths of one cell or fewer."""
    if cost is None:
        cost = _uniform_cost
    return sum(cost(a, b) for a, b in zip(path, path[1:]))


def get_path_length(path: Sequence[CubeCoord] | None) -> int:
    """Number of cells in ``path`` (not edges); 0 for None."""
    return len(path) if path is not None else 0
