"""
Test suite for A* pathfinding.

Tests cover:
- Trivial and straight paths
- Path structure (includes start and goal, contiguous)
- Unreachable goals
- Custom cost and heuristic functions
- Optimality against breadth-first hop counts
- Path cost and length helpers
"""
from __future__ import annotations

import logging

import pytest

from tick_hex import coord
from tick_hex.grid import create_grid, set_passable
from tick_hex.neighbors import get_neighbors, get_reachable
from tick_hex.pathfind import find_path, get_path_cost, get_path_length
from tick_hex.types import CubeCoord, Grid, GridConfig, Hexagon, Layout, OffsetCoord, Rectangle

ORIGIN = CubeCoord(0, 0, 0)


def _block(grid: Grid, *coords: CubeCoord) -> Grid:
    for c in coords:
        grid = set_passable(grid, c, False)
    return grid


def _hops(grid: Grid, start: CubeCoord, end: CubeCoord) -> int | None:
    for d in range(len(grid) + 1):
        if end in get_reachable(grid, start, d):
            return d
    return None


def _assert_contiguous(grid: Grid, path: list[CubeCoord]) -> None:
    for a, b in zip(path, path[1:]):
        assert coord.distance(a, b) == 1
    for c in path[1:]:
        assert grid.cells[c].passable


class TestFindPathBasics:
    def test_same_start_and_goal(self) -> None:
        grid = create_grid(Hexagon(2))
        assert find_path(grid, ORIGIN, ORIGIN) == [ORIGIN]

    def test_adjacent(self) -> None:
        grid = create_grid(Hexagon(2))
        assert find_path(grid, ORIGIN, CubeCoord(1, -1, 0)) == [ORIGIN, CubeCoord(1, -1, 0)]

    def test_straight_line(self) -> None:
        grid = create_grid(Hexagon(3))
        path = find_path(grid, ORIGIN, CubeCoord(3, -3, 0))
        assert path == [ORIGIN, CubeCoord(1, -1, 0), CubeCoord(2, -2, 0), CubeCoord(3, -3, 0)]

    def test_includes_endpoints(self) -> None:
        grid = create_grid(Hexagon(3))
        start, end = CubeCoord(-3, 1, 2), CubeCoord(2, 1, -3)
        path = find_path(grid, start, end)
        assert path is not None
        assert path[0] == start
        assert path[-1] == end
        assert len(path) == coord.distance(start, end) + 1
        _assert_contiguous(grid, path)

    def test_flat_rectangle(self) -> None:
        grid = create_grid(Rectangle(6, 4), GridConfig(layout=Layout.FLAT))
        start = coord.offset_to_cube(OffsetCoord(0, 0), Layout.FLAT)
        end = coord.offset_to_cube(OffsetCoord(5, 3), Layout.FLAT)
        path = find_path(grid, start, end)
        assert path is not None
        assert len(path) == coord.distance(start, end) + 1


class TestFindPathObstacles:
    def test_routes_around_wall(self) -> None:
        grid = _block(create_grid(Hexagon(3)), CubeCoord(1, -1, 0), CubeCoord(2, -2, 0))
        path = find_path(grid, ORIGIN, CubeCoord(3, -3, 0))
        assert path is not None
        assert CubeCoord(1, -1, 0) not in path
        assert CubeCoord(2, -2, 0) not in path
        _assert_contiguous(grid, path)
        assert len(path) - 1 == _hops(grid, ORIGIN, CubeCoord(3, -3, 0))

    def test_walled_in_start_returns_none(self) -> None:
        grid = create_grid(Rectangle(5, 5))
        start = coord.offset_to_cube(OffsetCoord(2, 2), Layout.POINTY)
        grid = _block(grid, *get_neighbors(grid, start))
        assert find_path(grid, start, CubeCoord(0, 0, 0)) is None

    def test_blocked_goal_returns_none(self) -> None:
        grid = _block(create_grid(Hexagon(2)), CubeCoord(2, -2, 0))
        assert find_path(grid, ORIGIN, CubeCoord(2, -2, 0)) is None

    def test_goal_outside_grid_returns_none(self) -> None:
        grid = create_grid(Hexagon(2))
        assert find_path(grid, ORIGIN, CubeCoord(5, -5, 0)) is None

    def test_disconnected_regions(self) -> None:
        grid = create_grid(Rectangle(7, 3))
        # Full column of walls at offset col 3.
        wall = [coord.offset_to_cube(OffsetCoord(3, row), Layout.POINTY) for row in range(3)]
        grid = _block(grid, *wall)
        start = coord.offset_to_cube(OffsetCoord(0, 1), Layout.POINTY)
        end = coord.offset_to_cube(OffsetCoord(6, 1), Layout.POINTY)
        assert find_path(grid, start, end) is None

    @pytest.mark.parametrize(
        "end",
        [CubeCoord(3, -3, 0), CubeCoord(0, 3, -3), CubeCoord(-3, 0, 3), CubeCoord(2, 1, -3)],
    )
    def test_optimal_hop_count(self, end: CubeCoord) -> None:
        grid = _block(
            create_grid(Hexagon(3)),
            CubeCoord(1, -1, 0), CubeCoord(1, 0, -1), CubeCoord(0, 1, -1),
            CubeCoord(-1, 1, 0), CubeCoord(2, -1, -1), CubeCoord(1, 1, -2),
        )
        path = find_path(grid, ORIGIN, end)
        assert path is not None
        _assert_contiguous(grid, path)
        assert len(path) - 1 == _hops(grid, ORIGIN, end)


class TestFindPathCustomFunctions:
    def test_cost_avoids_expensive_cell(self) -> None:
        grid = create_grid(Hexagon(2))
        swamp = CubeCoord(1, -1, 0)

        def cost(a: CubeCoord, b: CubeCoord) -> float:
            return 10 if b == swamp else 1

        path = find_path(grid, ORIGIN, CubeCoord(2, -2, 0), cost=cost)
        assert path is not None
        assert swamp not in path
        assert len(path) == 4
        assert get_path_cost(path, cost) == 3

    def test_default_cost_takes_direct_route(self) -> None:
        grid = create_grid(Hexagon(2))
        swamp = CubeCoord(1, -1, 0)
        path = find_path(grid, ORIGIN, CubeCoord(2, -2, 0))
        assert path == [ORIGIN, swamp, CubeCoord(2, -2, 0)]

    def test_zero_heuristic_still_optimal(self) -> None:
        grid = _block(create_grid(Hexagon(3)), CubeCoord(1, -1, 0), CubeCoord(2, -2, 0))
        end = CubeCoord(3, -3, 0)
        dijkstra = find_path(grid, ORIGIN, end, heuristic=lambda a, b: 0)
        astar = find_path(grid, ORIGIN, end)
        assert dijkstra is not None and astar is not None
        assert len(dijkstra) == len(astar)

    def test_logs_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        grid = create_grid(Hexagon(1))
        with caplog.at_level(logging.DEBUG, logger="tick_hex.pathfind"):
            find_path(grid, ORIGIN, CubeCoord(5, -5, 0))
        assert "unreachable" in caplog.text


class TestPathHelpers:
    def test_cost_uniform(self) -> None:
        path = [ORIGIN, CubeCoord(1, -1, 0), CubeCoord(2, -2, 0)]
        assert get_path_cost(path) == 2

    def test_cost_short_paths(self) -> None:
        assert get_path_cost([]) == 0
        assert get_path_cost([ORIGIN]) == 0

    def test_cost_custom(self) -> None:
        path = [ORIGIN, CubeCoord(1, -1, 0), CubeCoord(2, -2, 0)]
        assert get_path_cost(path, lambda a, b: 2.5) == 5.0

    def test_length_counts_cells(self) -> None:
        assert get_path_length([ORIGIN, CubeCoord(1, -1, 0)]) == 2

    def test_length_of_none(self) -> None:
        assert get_path_length(None) == 0
