"""Shared types for tick-hex: coordinates, cells, grids and shape descriptors."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Union

Number = Union[int, float]


class Layout(Enum):
    """Hex orientation. Decides the pixel and offset conversion formulas."""

    POINTY = "pointy"
    FLAT = "flat"


@dataclass(frozen=True)
class CubeCoord:
    """Cube coordinate. Cell coordinates satisfy x + y + z == 0.

    Fractional values only appear transiently (see ``coord.lerp``) and must
    go through ``coord.cube_round`` before being used to address a cell.
    """

    x: Number
    y: Number
    z: Number


@dataclass(frozen=True)
class OffsetCoord:
    col: int
    row: int


@dataclass(frozen=True)
class Pixel:
    x: float
    y: float


@dataclass(frozen=True)
class Cell:
    """A single grid cell.

    Attributes:
        coord: Position of the cell; always equal to its key in the grid.
        passable: Whether traversal and sight may pass through the cell.
        data: Opaque payload. Shallow-copied on replacement, never inspected.

    Compared by value but unhashable, since ``data`` is a dict.
    """

    coord: CubeCoord
    passable: bool = True
    data: dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]


# --- Shape descriptors ---


@dataclass(frozen=True)
class Rectangle:
    """width x height cells in offset (col, row) space."""

    width: int
    height: int


@dataclass(frozen=True)
class Hexagon:
    """All cells within ``radius`` of the origin."""

    radius: int


@dataclass(frozen=True)
class Bounds:
    min_x: int
    max_x: int
    min_y: int
    max_y: int


@dataclass(frozen=True)
class Custom:
    """Cells inside ``bounds`` (on the x and y axes) accepted by ``predicate``."""

    predicate: Callable[[CubeCoord], bool]
    bounds: Bounds


Shape = Union[Rectangle, Hexagon, Custom]


@dataclass(frozen=True)
class GridConfig:
    """Grid construction options.

    Attributes:
        layout: Hex orientation, a ``Layout`` or its string value.
        default_data: Template payload, shallow-copied into every new cell.
    """

    layout: Layout = Layout.POINTY
    default_data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "layout", Layout(self.layout))


@dataclass(frozen=True)
class Grid:
    """Immutable grid value. Mutators in ``tick_hex.grid`` return new grids.

    Behaves like a read-only mapping of coordinates: ``len``, ``in`` and
    iteration all work on the coordinate keys. Not hashable.
    """

    cells: Mapping[CubeCoord, Cell]
    layout: Layout = Layout.POINTY
    shape: Shape | None = None

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.cells, MappingProxyType):
            object.__setattr__(self, "cells", MappingProxyType(dict(self.cells)))

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def __iter__(self) -> Iterator[CubeCoord]:
        return iter(self.cells)
