"""JSON-backed tile map implementing the map query service.

Grids are row-major and indexed ``[y][x]``. Reads outside the map, or from a
tile layer the map does not have, return ``OUT_OF_BOUNDS`` so radar scans can
walk past the edges without special-casing them.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from tile_radar.models import OUT_OF_BOUNDS

Grid = list[list[int]]


class MapLoadError(RuntimeError):
    """Raised when a map file is missing, unreadable, or malformed."""


class MapEvent(BaseModel):
    id: int = Field(ge=1)
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class MapDocument(BaseModel):
    """On-disk map layout."""

    width: int = Field(ge=1)
    height: int = Field(ge=1)
    tile_layers: list[Grid] = Field(default_factory=list)
    terrain_tags: Grid | None = None
    regions: Grid | None = None
    events: list[MapEvent] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_shapes(self) -> "MapDocument":
        named = [(f"tile_layers[{index}]", grid) for index, grid in enumerate(self.tile_layers)]
        named += [("terrain_tags", self.terrain_tags), ("regions", self.regions)]
        for name, grid in named:
            if grid is None:
                continue
            if len(grid) != self.height or any(len(row) != self.width for row in grid):
                raise ValueError(f"{name} must be {self.height} rows of {self.width} cells")

        for event in self.events:
            if event.x >= self.width or event.y >= self.height:
                raise ValueError(f"event {event.id} at ({event.x}, {event.y}) is outside the map")
        return self


class GridMap:
    """In-memory map answering per-cell radar reads."""

    def __init__(self, document: MapDocument) -> None:
        self._doc = document
        self._events: dict[tuple[int, int], int] = {}
        for event in document.events:
            # first event listed on a cell wins, like the engine's lookup
            self._events.setdefault((event.x, event.y), event.id)

    @property
    def width(self) -> int:
        return self._doc.width

    @property
    def height(self) -> int:
        return self._doc.height

    @property
    def layer_count(self) -> int:
        return len(self._doc.tile_layers)

    def is_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self._doc.width and 0 <= y < self._doc.height

    def event_id_at(self, x: int, y: int) -> int:
        if not self.is_valid(x, y):
            return OUT_OF_BOUNDS
        return self._events.get((x, y), 0)

    def terrain_tag_at(self, x: int, y: int) -> int:
        return self._read(self._doc.terrain_tags, x, y)

    def tile_id_at(self, x: int, y: int, layer: int) -> int:
        if not 0 <= layer < self.layer_count:
            return OUT_OF_BOUNDS
        return self._read(self._doc.tile_layers[layer], x, y)

    def region_id_at(self, x: int, y: int) -> int:
        return self._read(self._doc.regions, x, y)

    def _read(self, grid: Grid | None, x: int, y: int) -> int:
        if not self.is_valid(x, y):
            return OUT_OF_BOUNDS
        if grid is None:
            return 0
        return grid[y][x]


def load_map(path: str | Path) -> GridMap:
    target = Path(path).expanduser()
    if not target.exists():
        raise MapLoadError(f"Map file not found: {target}")
    try:
        document = MapDocument.model_validate_json(target.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise MapLoadError(f"Invalid map file {target}: {exc}") from exc
    return GridMap(document)
