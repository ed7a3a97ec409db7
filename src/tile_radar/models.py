from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

OUT_OF_BOUNDS = -1
"""Value map services return for coordinates outside the map."""


class SearchKind(str, Enum):
    """What a radar scan looks for in each cell."""

    EVENT_EQUALS = "eventIDMatch"
    EVENT_GREATER_THAN = "eventIDGreater"
    EVENT_LESS_THAN = "eventIDLesser"
    TERRAIN_TAG_EQUALS = "terrainTag"
    TILE_ID_EQUALS = "tileID"
    REGION_ID_EQUALS = "regionID"

    @property
    def command_name(self) -> str:
        return self.value

    @property
    def uses_layer(self) -> bool:
        return self is SearchKind.TILE_ID_EQUALS


@dataclass(slots=True, frozen=True)
class Query:
    """Fully-resolved radar query."""

    kind: SearchKind
    target_value: int
    center_x: int
    center_y: int
    layer: int
    radius: int

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be >= 0, got {self.radius}")


@dataclass(slots=True, frozen=True)
class Defaults:
    """Fallback values for every query field plus the action bound to each kind."""

    radius: int
    layer: int
    x_variable: int
    y_variable: int
    targets: Mapping[SearchKind, int]
    actions: Mapping[SearchKind, int]
    placeholder: str = "x"

    def __post_init__(self) -> None:
        missing = [kind.command_name for kind in SearchKind if kind not in self.targets or kind not in self.actions]
        if missing:
            raise ValueError(f"Defaults missing target/action for: {', '.join(missing)}")
        object.__setattr__(self, "targets", MappingProxyType(dict(self.targets)))
        object.__setattr__(self, "actions", MappingProxyType(dict(self.actions)))


@dataclass(slots=True, frozen=True)
class CellSample:
    """Every queryable attribute of one cell, read on demand."""

    x: int
    y: int
    layer: int
    event_id: int
    terrain_tag: int
    tile_id: int
    region_id: int


@dataclass(slots=True, frozen=True)
class Match:
    """First cell in scan order that satisfied the query predicate."""

    x: int
    y: int
    observed: int

    @property
    def coordinate(self) -> tuple[int, int]:
        return (self.x, self.y)
