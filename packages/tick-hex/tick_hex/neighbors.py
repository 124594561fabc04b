"""Spatial queries: neighbors, ranges, rings, spirals and flood-fill reachability."""
from __future__ import annotations

from tick_hex.coord import add, directions, distance
from tick_hex.grid import is_passable
from tick_hex.types import CubeCoord, Grid


def get_neighbors(
    grid: Grid, coord: CubeCoord, passable_only: bool = False
) -> list[CubeCoord]:
    """Existing neighbors of ``coord`` in canonical direction order."""
    result: list[CubeCoord] = []
    for d in directions():
        n = add(coord, d)
        if n not in grid.cells:
            continue
        if passable_only and not is_passable(grid, n):
            continue
        result.append(n)
    return result


def get_range(grid: Grid, coord: CubeCoord, r: int) -> list[CubeCoord]:
    """Every cell within distance ``r``, obstacles included."""
    return [c for c in grid.cells if distance(coord, c) <= r]


def get_ring(grid: Grid, coord: CubeCoord, r: int) -> list[CubeCoord]:
    return [c for c in grid.cells if distance(coord, c) == r]


def get_spiral(grid: Grid, center: CubeCoord, max_radius: int) -> list[CubeCoord]:
    """``center`` followed by rings 1..max_radius, innermost first."""
    result = [center]
    for r in range(1, max_radius + 1):
        result.extend(get_ring(grid, center, r))
    return result


def get_reachable(grid: Grid, start: CubeCoord, max_distance: int) -> list[CubeCoord]:
    """Cells reachable from ``start`` in at most ``max_distance`` passable hops.

    Breadth-first, one layer per hop; the result lists layers in order, so
    ``start`` is always first.
    """
    visited = {start}
    fringes: list[list[CubeCoord]] = [[start]]

    for _ in range(max_distance):
        layer: list[CubeCoord] = []
        for coord in fringes[-1]:
            for n in get_neighbors(grid, coord, passable_only=True):
                if n not in visited:
                    visited.add(n)
                    layer.append(n)
        fringes.append(layer)

    return [c for fringe in fringes for c in fringe]
