"""Cube coordinate math and conversions. Pure functions, no grid access."""
from __future__ import annotations

import math

from tick_hex.types import CubeCoord, Layout, Number, OffsetCoord, Pixel

_SQRT3 = math.sqrt(3.0)

# Neighbor enumeration order. Index i is the direction used by neighbor(c, i).
_DIRECTIONS = (
    CubeCoord(1, -1, 0),
    CubeCoord(1, 0, -1),
    CubeCoord(0, 1, -1),
    CubeCoord(-1, 1, 0),
    CubeCoord(-1, 0, 1),
    CubeCoord(0, -1, 1),
)


def add(a: CubeCoord, b: CubeCoord) -> CubeCoord:
    return CubeCoord(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: CubeCoord, b: CubeCoord) -> CubeCoord:
    return CubeCoord(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(c: CubeCoord, factor: Number) -> CubeCoord:
    return CubeCoord(c.x * factor, c.y * factor, c.z * factor)


def directions() -> tuple[CubeCoord, ...]:
    """The six unit direction vectors, in canonical neighbor order."""
    return _DIRECTIONS


def neighbor(c: CubeCoord, direction: int) -> CubeCoord:
    """Adjacent coordinate in ``direction`` (0-5). Raises IndexError otherwise."""
    if not 0 <= direction < len(_DIRECTIONS):
        raise IndexError(f"direction must be in 0..5, got {direction}")
    return add(c, _DIRECTIONS[direction])


def equals(a: CubeCoord, b: CubeCoord) -> bool:
    return a.x == b.x and a.y == b.y and a.z == b.z


def hash_coord(c: CubeCoord) -> str:
    """Canonical string key ``"x,y,z"``."""
    return f"{c.x},{c.y},{c.z}"


def unhash_coord(key: str) -> CubeCoord:
    """Inverse of hash_coord for integer coordinates."""
    x, y, z = (int(part) for part in key.split(","))
    return CubeCoord(x, y, z)


def distance(a: CubeCoord, b: CubeCoord) -> Number:
    """Hex step distance. Integral for cell coordinates."""
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def lerp(a: CubeCoord, b: CubeCoord, t: float) -> CubeCoord:
    """Per-axis interpolation. The result may be off-lattice; see cube_round."""
    return CubeCoord(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def cube_round(c: CubeCoord) -> CubeCoord:
    """Snap a fractional cube coordinate to the nearest cell.

    The axis with the largest rounding error is rebuilt from the other two.
    Precedence on ties: x only if strictly largest, then y if larger than z,
    otherwise z.
    """
    rx = _round_half_up(c.x)
    ry = _round_half_up(c.y)
    rz = _round_half_up(c.z)

    dx = abs(rx - c.x)
    dy = abs(ry - c.y)
    dz = abs(rz - c.z)

    if dx > dy and dx > dz:
        rx = -ry - rz
    elif dy > dz:
        ry = -rx - rz
    else:
        rz = -rx - ry

    return CubeCoord(rx, ry, rz)


def cube_to_pixel(c: CubeCoord, layout: Layout | str, size: float) -> Pixel:
    """Center of the hex in pixel space for hexes of circumradius ``size``."""
    if Layout(layout) is Layout.POINTY:
        return Pixel(
            size * (_SQRT3 * c.x + _SQRT3 / 2 * c.z),
            size * (1.5 * c.z),
        )
    return Pixel(
        size * (1.5 * c.x),
        size * (_SQRT3 / 2 * c.x + _SQRT3 * c.z),
    )


def pixel_to_cube(p: Pixel, layout: Layout | str, size: float) -> CubeCoord:
    """Cell containing pixel ``p``. Inverse of cube_to_pixel."""
    if Layout(layout) is Layout.POINTY:
        q = (_SQRT3 / 3 * p.x - p.y / 3) / size
        r = (2 / 3 * p.y) / size
    else:
        q = (2 / 3 * p.x) / size
        r = (-p.x / 3 + _SQRT3 / 3 * p.y) / size
    return cube_round(CubeCoord(q, -q - r, r))


def cube_to_offset(c: CubeCoord, layout: Layout | str) -> OffsetCoord:
    """Pointy layouts use odd-r offsets, flat layouts odd-q."""
    x, z = int(c.x), int(c.z)
    if Layout(layout) is Layout.POINTY:
        return OffsetCoord(col=x + (z - (z & 1)) // 2, row=z)
    return OffsetCoord(col=x, row=z + (x - (x & 1)) // 2)


def offset_to_cube(o: OffsetCoord, layout: Layout | str) -> CubeCoord:
    if Layout(layout) is Layout.POINTY:
        x = o.col - (o.row - (o.row & 1)) // 2
        z = o.row
    else:
        x = o.col
        z = o.row - (o.col - (o.col & 1)) // 2
    return CubeCoord(x, -x - z, z)
