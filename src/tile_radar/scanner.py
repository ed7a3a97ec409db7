"""Square-neighborhood radar scan with first-match semantics."""

from __future__ import annotations

import operator
from typing import Callable, Iterator

from tile_radar.adapters.host import MapQueryService
from tile_radar.models import OUT_OF_BOUNDS, CellSample, Match, Query, SearchKind

Sampler = Callable[[MapQueryService, int, int, int], int]
Comparator = Callable[[int, int], bool]


def _event_id(maps: MapQueryService, x: int, y: int, layer: int) -> int:
    return maps.event_id_at(x, y)


def _terrain_tag(maps: MapQueryService, x: int, y: int, layer: int) -> int:
    return maps.terrain_tag_at(x, y)


def _tile_id(maps: MapQueryService, x: int, y: int, layer: int) -> int:
    return maps.tile_id_at(x, y, layer)


def _region_id(maps: MapQueryService, x: int, y: int, layer: int) -> int:
    return maps.region_id_at(x, y)


PREDICATES: dict[SearchKind, tuple[Sampler, Comparator]] = {
    SearchKind.EVENT_EQUALS: (_event_id, operator.eq),
    SearchKind.EVENT_GREATER_THAN: (_event_id, operator.gt),
    SearchKind.EVENT_LESS_THAN: (_event_id, operator.lt),
    SearchKind.TERRAIN_TAG_EQUALS: (_terrain_tag, operator.eq),
    SearchKind.TILE_ID_EQUALS: (_tile_id, operator.eq),
    SearchKind.REGION_ID_EQUALS: (_region_id, operator.eq),
}


def neighborhood(center_x: int, center_y: int, radius: int) -> Iterator[tuple[int, int]]:
    """Yield the (2r+1)^2 cells around the center: x outer, y inner, both ascending."""
    if radius < 0:
        raise ValueError(f"radius must be >= 0, got {radius}")
    for x in range(center_x - radius, center_x + radius + 1):
        for y in range(center_y - radius, center_y + radius + 1):
            yield x, y


def scan(query: Query, maps: MapQueryService) -> Match | None:
    """Return the first cell in scan order satisfying the query, or ``None``.

    Only the attribute the query's kind needs is read. A sampled
    ``OUT_OF_BOUNDS`` never matches, whatever the comparison.
    """
    sampler, compare = PREDICATES[query.kind]
    for x, y in neighborhood(query.center_x, query.center_y, query.radius):
        observed = sampler(maps, x, y, query.layer)
        if observed != OUT_OF_BOUNDS and compare(observed, query.target_value):
            return Match(x=x, y=y, observed=observed)
    return None


def sample_cell(maps: MapQueryService, x: int, y: int, layer: int = 0) -> CellSample:
    """Read every radar attribute of one cell."""
    return CellSample(
        x=x,
        y=y,
        layer=layer,
        event_id=maps.event_id_at(x, y),
        terrain_tag=maps.terrain_tag_at(x, y),
        tile_id=maps.tile_id_at(x, y, layer),
        region_id=maps.region_id_at(x, y),
    )
