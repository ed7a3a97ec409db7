"""Runtime configuration for tile-radar."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tile_radar.models import Defaults, SearchKind
from tile_radar.resolver import is_integer_token


class Settings(BaseSettings):
    """Environment-driven radar parameters."""

    model_config = SettingsConfigDict(env_prefix="TILE_RADAR_", env_file=".env", extra="ignore")

    app_name: str = "tile-radar"
    log_level: str = "INFO"
    map_path: str | None = Field(default=None, description="JSON map used by the CLI when --map is omitted.")

    radius: int = Field(default=2, ge=0, description="Radar radius in grid cells.")
    x_variable: int = Field(default=15, description="Variable slot holding the scan center X.")
    y_variable: int = Field(default=16, description="Variable slot holding the scan center Y.")
    tile_layer: int = Field(default=0, ge=0, description="Tile layer inspected by tileID searches.")
    placeholder: str = Field(default="x", min_length=1, description="Token meaning 'use the default here'.")

    event_id_match: int = 1
    event_id_match_action: int = 11
    event_id_greater: int = 0
    event_id_greater_action: int = 12
    event_id_less: int = 1
    event_id_less_action: int = 13
    terrain_tag: int = 1
    terrain_action: int = 14
    tile_id: int = 1
    tile_action: int = 15
    region_id: int = 1
    region_action: int = 16

    @field_validator("placeholder")
    @classmethod
    def placeholder_is_a_single_non_numeric_token(cls, value: str) -> str:
        if any(char.isspace() for char in value):
            raise ValueError("placeholder cannot contain whitespace")
        if is_integer_token(value):
            raise ValueError("placeholder cannot be an integer")
        return value

    def to_defaults(self) -> Defaults:
        return Defaults(
            radius=self.radius,
            layer=self.tile_layer,
            x_variable=self.x_variable,
            y_variable=self.y_variable,
            placeholder=self.placeholder,
            targets={
                SearchKind.EVENT_EQUALS: self.event_id_match,
                SearchKind.EVENT_GREATER_THAN: self.event_id_greater,
                SearchKind.EVENT_LESS_THAN: self.event_id_less,
                SearchKind.TERRAIN_TAG_EQUALS: self.terrain_tag,
                SearchKind.TILE_ID_EQUALS: self.tile_id,
                SearchKind.REGION_ID_EQUALS: self.region_id,
            },
            actions={
                SearchKind.EVENT_EQUALS: self.event_id_match_action,
                SearchKind.EVENT_GREATER_THAN: self.event_id_greater_action,
                SearchKind.EVENT_LESS_THAN: self.event_id_less_action,
                SearchKind.TERRAIN_TAG_EQUALS: self.terrain_action,
                SearchKind.TILE_ID_EQUALS: self.tile_action,
                SearchKind.REGION_ID_EQUALS: self.region_action,
            },
        )


settings = Settings()
