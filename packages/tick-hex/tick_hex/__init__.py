"""tick-hex - Hexagonal grid geometry, queries and pathfinding for the tick engine."""
from __future__ import annotations

from tick_hex import coord
from tick_hex.entities import Entity, IdGenerator, has_components, query
from tick_hex.grid import (
    create_grid,
    filter_cells,
    for_each_cell,
    get_cell,
    get_obstacles,
    has_cell,
    is_passable,
    map_cells,
    remove_cell,
    remove_cell_data,
    set_cell,
    set_cell_data,
    set_passable,
    update_cell,
)
from tick_hex.line import get_line, get_visible_cells, has_line_of_sight
from tick_hex.neighbors import (
    get_neighbors,
    get_range,
    get_reachable,
    get_ring,
    get_spiral,
)
from tick_hex.pathfind import find_path, get_path_cost, get_path_length
from tick_hex.types import (
    Bounds,
    Cell,
    CubeCoord,
    Custom,
    Grid,
    GridConfig,
    Hexagon,
    Layout,
    OffsetCoord,
    Pixel,
    Rectangle,
    Shape,
)

__all__ = [
    "Bounds",
    "Cell",
    "CubeCoord",
    "Custom",
    "Entity",
    "Grid",
    "GridConfig",
    "Hexagon",
    "IdGenerator",
    "Layout",
    "OffsetCoord",
    "Pixel",
    "Rectangle",
    "Shape",
    "coord",
    "create_grid",
    "filter_cells",
    "find_path",
    "for_each_cell",
    "get_cell",
    "get_line",
    "get_neighbors",
    "get_obstacles",
    "get_path_cost",
    "get_path_length",
    "get_range",
    "get_reachable",
    "get_ring",
    "get_spiral",
    "get_visible_cells",
    "has_cell",
    "has_components",
    "has_line_of_sight",
    "is_passable",
    "map_cells",
    "query",
    "remove_cell",
    "remove_cell_data",
    "set_cell",
    "set_cell_data",
    "set_passable",
    "update_cell",
]
