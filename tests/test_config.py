from __future__ import annotations

import pytest
from pydantic import ValidationError

from tile_radar.config import Settings
from tile_radar.models import SearchKind


def test_settings_defaults_build_radar_defaults(monkeypatch) -> None:
    monkeypatch.delenv("TILE_RADAR_RADIUS", raising=False)
    defaults = Settings(_env_file=None).to_defaults()

    assert defaults.radius == 2
    assert (defaults.x_variable, defaults.y_variable) == (15, 16)
    assert defaults.layer == 0
    assert defaults.placeholder == "x"
    assert defaults.targets[SearchKind.EVENT_GREATER_THAN] == 0
    assert [defaults.actions[kind] for kind in SearchKind] == [11, 12, 13, 14, 15, 16]


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("TILE_RADAR_RADIUS", "5")
    monkeypatch.setenv("TILE_RADAR_REGION_ACTION", "40")

    defaults = Settings(_env_file=None).to_defaults()

    assert defaults.radius == 5
    assert defaults.actions[SearchKind.REGION_ID_EQUALS] == 40


def test_negative_radius_setting_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("TILE_RADAR_RADIUS", "-1")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults_are_read_only() -> None:
    defaults = Settings(_env_file=None).to_defaults()

    with pytest.raises(TypeError):
        defaults.targets[SearchKind.EVENT_EQUALS] = 99  # type: ignore[index]


@pytest.mark.parametrize("placeholder", ["0", "-3", "+7", "a b", "\t"])
def test_placeholder_must_not_shadow_integers_or_split(placeholder: str) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, placeholder=placeholder)


def test_non_numeric_placeholder_is_accepted() -> None:
    assert Settings(_env_file=None, placeholder="_").to_defaults().placeholder == "_"
