"""Line drawing and line-of-sight tests."""
from __future__ import annotations

import math

from tick_hex.coord import cube_round, distance, lerp
from tick_hex.grid import is_passable
from tick_hex.types import CubeCoord, Grid


def get_line(a: CubeCoord, b: CubeCoord) -> list[CubeCoord]:
    """Cells on the straight segment from ``a`` to ``b``, both ends included."""
    n = int(distance(a, b))
    return [cube_round(lerp(a, b, i / n if n else 0.0)) for i in range(n + 1)]


def has_line_of_sight(grid: Grid, a: CubeCoord, b: CubeCoord) -> bool:
    """True if every cell on the line exists and is passable."""
    return all(is_passable(grid, c) for c in get_line(a, b))


def get_visible_cells(
    grid: Grid, origin: CubeCoord, max_range: float = math.inf
) -> list[CubeCoord]:
    return [
        c
        for c in grid.cells
        if distance(origin, c) <= max_range and has_line_of_sight(grid, origin, c)
    ]
