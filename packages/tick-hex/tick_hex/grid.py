"""GridStore - grid construction and copy-on-write cell mutation.

A ``Grid`` is never changed in place. Every mutator copies the cell mapping,
replaces the touched ``Cell`` by value and returns a new ``Grid``; untouched
cells are shared between generations.
"""
from __future__ import annotations

import dataclasses
import logging
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from tick_hex.coord import offset_to_cube
from tick_hex.types import (
    Cell,
    CubeCoord,
    Custom,
    Grid,
    GridConfig,
    Hexagon,
    Layout,
    OffsetCoord,
    Rectangle,
    Shape,
)

log = logging.getLogger(__name__)


# --- Construction ---


def _shape_coords(shape: Shape, layout: Layout) -> Iterator[CubeCoord]:
    if isinstance(shape, Rectangle):
        for row in range(shape.height):
            for col in range(shape.width):
                yield offset_to_cube(OffsetCoord(col=col, row=row), layout)
    elif isinstance(shape, Hexagon):
        radius = shape.radius
        for x in range(-radius, radius + 1):
            for y in range(max(-radius, -x - radius), min(radius, -x + radius) + 1):
                yield CubeCoord(x, y, -x - y)
    elif isinstance(shape, Custom):
        b = shape.bounds
        for x in range(b.min_x, b.max_x + 1):
            for y in range(b.min_y, b.max_y + 1):
                coord = CubeCoord(x, y, -x - y)
                if shape.predicate(coord):
                    yield coord
    else:
        raise TypeError(f"Unknown grid shape: {shape!r}")


def create_grid(shape: Shape, config: GridConfig | None = None) -> Grid:
    """Build a grid holding exactly the cells of ``shape``.

    Every cell starts passable with its own shallow copy of
    ``config.default_data``.
    """
    if config is None:
        config = GridConfig()
    cells: dict[CubeCoord, Cell] = {}
    for coord in _shape_coords(shape, config.layout):
        cells[coord] = Cell(coord=coord, passable=True, data=dict(config.default_data))
    return Grid(cells=MappingProxyType(cells), layout=config.layout, shape=shape)


def _with_cells(grid: Grid, cells: dict[CubeCoord, Cell]) -> Grid:
    return dataclasses.replace(grid, cells=MappingProxyType(cells))


# --- Single-cell access ---


def get_cell(grid: Grid, coord: CubeCoord) -> Cell | None:
    return grid.cells.get(coord)


def has_cell(grid: Grid, coord: CubeCoord) -> bool:
    return coord in grid.cells


def set_cell(grid: Grid, coord: CubeCoord, cell: Cell) -> Grid:
    """Store ``cell`` at ``coord``. The stored cell's coord is forced to ``coord``."""
    cells = dict(grid.cells)
    if cell.coord != coord:
        cell = dataclasses.replace(cell, coord=coord)
    cells[coord] = cell
    return _with_cells(grid, cells)


def update_cell(grid: Grid, coord: CubeCoord, fn: Callable[[Cell], Cell]) -> Grid:
    """Replace the cell at ``coord`` with ``fn(cell)``. Same grid if absent."""
    cell = grid.cells.get(coord)
    if cell is None:
        return grid
    return set_cell(grid, coord, fn(cell))


def remove_cell(grid: Grid, coord: CubeCoord) -> Grid:
    if coord not in grid.cells:
        return grid
    cells = dict(grid.cells)
    del cells[coord]
    return _with_cells(grid, cells)


def set_passable(grid: Grid, coord: CubeCoord, passable: bool) -> Grid:
    return update_cell(
        grid, coord, lambda cell: dataclasses.replace(cell, passable=passable)
    )


def is_passable(grid: Grid, coord: CubeCoord) -> bool:
    """Absent cells read as not passable."""
    cell = grid.cells.get(coord)
    return cell.passable if cell is not None else False


# --- Whole-grid operations ---


def get_obstacles(grid: Grid) -> list[CubeCoord]:
    return [cell.coord for cell in grid.cells.values() if not cell.passable]


def map_cells(grid: Grid, fn: Callable[[Cell], Cell]) -> Grid:
    """Apply ``fn`` to every cell. Keys are unchanged."""
    return _with_cells(grid, {key: fn(cell) for key, cell in grid.cells.items()})


def filter_cells(grid: Grid, predicate: Callable[[Cell], bool]) -> list[CubeCoord]:
    return [cell.coord for cell in grid.cells.values() if predicate(cell)]


def for_each_cell(grid: Grid, fn: Callable[[Cell], Any]) -> None:
    for cell in grid.cells.values():
        fn(cell)


# --- Payload ---


def _entity_key(entity: Any) -> str | None:
    key = getattr(entity, "id", None)
    if key is None and isinstance(entity, Mapping):
        key = entity.get("id")
    return key or None


def set_cell_data(grid: Grid, coord: CubeCoord, *entities: Any) -> Grid:
    """Store entities in the payload of the cell at ``coord``.

    Entities carrying an ``id`` are stored under that id, replacing any
    previous entry with the same id. Mappings without an id are merged key
    by key into the payload; this is a legacy path kept for existing callers.
    Anything else without an id is skipped with a warning.
    """
    cell = grid.cells.get(coord)
    if cell is None:
        log.warning("set_cell_data: no cell at %s", coord)
        return grid
    if not entities:
        log.warning("set_cell_data: no data provided for %s", coord)
        return grid

    data = dict(cell.data)
    for entity in entities:
        if entity is None:
            log.warning("set_cell_data: entity cannot be None")
            continue
        key = _entity_key(entity)
        if key is not None:
            data[key] = entity
        elif isinstance(entity, Mapping):
            log.debug("set_cell_data: merging keyless payload into %s", coord)
            data.update(entity)
        else:
            log.warning("set_cell_data: skipping %r, it has no id to store it under", entity)

    return set_cell(grid, coord, dataclasses.replace(cell, data=data))


def remove_cell_data(grid: Grid, coord: CubeCoord, *targets: Any) -> Grid:
    """Remove payload entries by id string, by entity id, or by identity."""
    cell = grid.cells.get(coord)
    if cell is None:
        log.warning("remove_cell_data: no cell at %s", coord)
        return grid

    data = dict(cell.data)
    for target in targets:
        if isinstance(target, str):
            data.pop(target, None)
            continue
        key = _entity_key(target)
        if key is not None:
            data.pop(key, None)
        else:
            for k in [k for k, v in data.items() if v is target]:
                del data[k]

    return set_cell(grid, coord, dataclasses.replace(cell, data=data))
