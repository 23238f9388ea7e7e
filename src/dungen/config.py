from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError
from .generator import RoomConfig
from .render import Atlas

logger = logging.getLogger(__name__)

DEFAULTS_RESOURCE = "defaults.yaml"

AtlasOffset = Tuple[int, int]


class MapConfig(BaseModel):
    """Settings for one generated map: image size, atlas sprites, room ranges."""

    width: int = Field(..., gt=0, description="Output image width in pixels")
    height: int = Field(..., gt=0, description="Output image height in pixels")
    tile_size: int = Field(..., gt=0, description="Edge of one square tile in pixels")
    wall_tile_h: AtlasOffset = Field(..., description="Atlas offset of the horizontal wall sprite")
    wall_tile_v_right: AtlasOffset = Field(..., description="Atlas offset of the right wall sprite")
    wall_tile_v_left: AtlasOffset = Field(..., description="Atlas offset of the left wall sprite")
    floor_tile: AtlasOffset = Field(..., description="Atlas offset of the floor sprite")
    max_room_size: int = Field(..., gt=0)
    min_room_size: int = Field(..., gt=0)
    max_rooms: int = Field(..., ge=0)
    min_rooms: int = Field(..., ge=0)
    max_attempts: int = Field(1000, gt=0, description="Cap on candidate rooms drawn during placement")
    seed: Optional[int] = Field(default=None, description="Seed for the random source; None for a fresh map")

    @field_validator("wall_tile_h", "wall_tile_v_right", "wall_tile_v_left", "floor_tile")
    @classmethod
    def offsets_not_negative(cls, v: AtlasOffset) -> AtlasOffset:
        if v[0] < 0 or v[1] < 0:
            raise ValueError("atlas offsets must be non-negative")
        return v

    @model_validator(mode="after")
    def check_ranges(self) -> "MapConfig":
        if self.min_room_size > self.max_room_size:
            raise ValueError("min_room_size must not exceed max_room_size")
        if self.min_rooms > self.max_rooms:
            raise ValueError("min_rooms must not exceed max_rooms")
        if self.tile_size > self.width or self.tile_size > self.height:
            raise ValueError("tile_size must not exceed the image size")
        return self

    def room_config(self) -> RoomConfig:
        return RoomConfig(
            max_room_size=self.max_room_size,
            min_room_size=self.min_room_size,
            max_rooms=self.max_rooms,
            min_rooms=self.min_rooms,
            max_attempts=self.max_attempts,
        )

    def atlas(self) -> Atlas:
        return Atlas(
            wall_h=self.wall_tile_h,
            wall_v_right=self.wall_tile_v_right,
            wall_v_left=self.wall_tile_v_left,
            floor=self.floor_tile,
        )


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for k, v in (overlay or {}).items():
        if isinstance(v, dict) and isinstance(base.get(k), dict):
            merged[k] = _deep_merge(base[k], v)
        else:
            merged[k] = v
    return merged


def _parse_yaml(text: str, source: str) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {source}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{source} must contain a mapping, got {type(data).__name__}")
    return data


def load_defaults() -> Dict[str, Any]:
    text = resources.files("dungen").joinpath(DEFAULTS_RESOURCE).read_text(encoding="utf-8")
    logger.debug("Loaded embedded default config resource")
    return _parse_yaml(text, DEFAULTS_RESOURCE)


def load_config(path: Optional[Path] = None, **overrides: Any) -> MapConfig:
    """Load map settings from built-in defaults and an optional user YAML file.

    Keys in the user file replace the defaults; keyword ``overrides`` that are
    not None win over both.
    """
    data = load_defaults()
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        data = _deep_merge(data, _parse_yaml(path.read_text(encoding="utf-8"), str(path)))
        logger.info("Loaded config from %s", path)
    data = _deep_merge(data, {k: v for k, v in overrides.items() if v is not None})

    try:
        config = MapConfig(**data)
    except ValidationError as e:
        source = f" in {path}" if path else ""
        lines = [f"Invalid config{source}:"]
        for err in e.errors():
            where = ".".join(str(p) for p in err["loc"]) or "<root>"
            lines.append(f" - at {where}: {err['msg']}")
        raise ConfigError("\n".join(lines)) from e
    logger.debug("Config resolved: %s", config)
    return config
