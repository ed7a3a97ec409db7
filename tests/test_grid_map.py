from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tile_radar.adapters.grid_map import GridMap, MapDocument, MapLoadError, load_map
from tile_radar.models import OUT_OF_BOUNDS


def _document(**overrides) -> dict:
    payload = {
        "width": 3,
        "height": 2,
        "tile_layers": [[[1, 2, 3], [4, 5, 6]], [[0, 0, 9], [0, 0, 0]]],
        "terrain_tags": [[0, 1, 0], [0, 0, 2]],
        "events": [{"id": 4, "x": 2, "y": 1}, {"id": 7, "x": 2, "y": 1}],
    }
    payload.update(overrides)
    return payload


def test_grid_map_reads_row_major_cells() -> None:
    grid = GridMap(MapDocument.model_validate(_document()))

    assert grid.tile_id_at(2, 0, 0) == 3
    assert grid.tile_id_at(2, 0, 1) == 9
    assert grid.terrain_tag_at(1, 0) == 1
    assert grid.terrain_tag_at(2, 1) == 2
    assert grid.event_id_at(2, 1) == 4
    assert grid.event_id_at(0, 0) == 0
    assert grid.region_id_at(0, 0) == 0


@pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, 2), (0, -1)])
def test_out_of_bounds_reads_sentinel(x: int, y: int) -> None:
    grid = GridMap(MapDocument.model_validate(_document()))

    assert grid.event_id_at(x, y) == OUT_OF_BOUNDS
    assert grid.terrain_tag_at(x, y) == OUT_OF_BOUNDS
    assert grid.tile_id_at(x, y, 0) == OUT_OF_BOUNDS
    assert grid.region_id_at(x, y) == OUT_OF_BOUNDS


def test_missing_layer_reads_sentinel() -> None:
    grid = GridMap(MapDocument.model_validate(_document()))

    assert grid.tile_id_at(0, 0, 5) == OUT_OF_BOUNDS


def test_shape_mismatch_is_rejected() -> None:
    with pytest.raises(ValidationError):
        MapDocument.model_validate(_document(regions=[[1, 1, 1]]))


def test_event_outside_map_is_rejected() -> None:
    with pytest.raises(ValidationError):
        MapDocument.model_validate(_document(events=[{"id": 1, "x": 3, "y": 0}]))


def test_load_map_from_json(tmp_path: Path) -> None:
    path = tmp_path / "map.json"
    path.write_text(json.dumps(_document()), encoding="utf-8")

    grid = load_map(path)

    assert (grid.width, grid.height, grid.layer_count) == (3, 2, 2)


def test_load_map_errors(tmp_path: Path) -> None:
    with pytest.raises(MapLoadError, match="not found"):
        load_map(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(MapLoadError, match="Invalid map file"):
        load_map(broken)
