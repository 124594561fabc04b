"""Entity records stored in cell payloads, and component queries over a grid."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from tick_hex.types import Cell, Grid


@dataclass(frozen=True)
class Entity:
    """Keyed record for a cell payload.

    Attributes:
        id: Payload key the entity is stored under by ``set_cell_data``.
        components: Component name -> value.

    Compared by value but unhashable, since ``components`` is a dict.
    """

    id: str
    components: dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def get(self, name: str, default: Any = None) -> Any:
        return self.components.get(name, default)


class IdGenerator:
    """Mints entity ids ``f"{prefix}{n}"`` with n counting up from ``start``.

    Owned by the caller; separate generators never share a counter.
    """

    def __init__(self, prefix: str = "entity-", start: int = 0) -> None:
        self._prefix = prefix
        self._next = start

    @property
    def prefix(self) -> str:
        return self._prefix

    def next_id(self) -> str:
        eid = f"{self._prefix}{self._next}"
        self._next += 1
        return eid

    def create(self, **components: Any) -> Entity:
        return Entity(id=self.next_id(), components=dict(components))

    def reset(self, start: int = 0) -> None:
        self._next = start


Record = Union[Entity, Mapping[str, Any]]


def has_components(record: Record, *names: str) -> bool:
    """True if ``record`` carries every component in ``names``.

    Mapping records use their keys as component names; ``"id"`` is not a
    component.
    """
    if isinstance(record, Entity):
        return all(name in record.components for name in names)
    return all(name != "id" and name in record for name in names)


def query(grid: Grid, *names: str) -> list[tuple[Cell, Record]]:
    """(cell, record) for every stored Entity or mapping carrying all ``names``."""
    result: list[tuple[Cell, Record]] = []
    for cell in grid.cells.values():
        for value in cell.data.values():
            if isinstance(value, (Entity, Mapping)) and has_components(value, *names):
                result.append((cell, value))
    return result
