"""Rooms-and-corridors dungeon generation.

High-level phases:
    * Allocate a column-major TileGrid sized from the output image.
    * Rejection-sample rectangles, carving each accepted room immediately.
    * Walk the rooms in acceptance order and join room i to room i+1 with an
      L-shaped corridor whose elbow order is a coin flip.

Placement keeps rooms at least one tile off the low edges and three tiles off
the far edges, so room boundary classification always applies to generated
rooms. The placement loop is capped by ``RoomConfig.max_attempts``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .carving import carve_h_tunnel, carve_room, carve_v_tunnel
from .errors import ConfigError, UnsatisfiableConfigError
from .geometry import Rect
from .rng import RNG
from .tiles import TileGrid

logger = logging.getLogger(__name__)

# Reserved tiles between a room's far edge and the far edge of the map.
FAR_EDGE_MARGIN = 3
# Lowest x/y a room may start at.
NEAR_EDGE_MARGIN = 1


@dataclass
class RoomConfig:
    max_room_size: int
    min_room_size: int
    max_rooms: int
    min_rooms: int
    max_attempts: int = 1000


@dataclass
class DungeonLayout:
    grid: TileGrid
    rooms: List[Rect] = field(default_factory=list)
    attempts: int = 0
    target_rooms: int = 0


def _placement_limit(map_extent: int, room_extent: int) -> int:
    """Highest start coordinate for a room of ``room_extent`` (inclusive)."""
    return map_extent - room_extent - FAR_EDGE_MARGIN - 1


def place_rooms(grid: TileGrid, config: RoomConfig, rng: RNG) -> DungeonLayout:
    """Sample and carve non-intersecting rooms until the drawn target is met.

    Raises UnsatisfiableConfigError if the smallest room cannot fit the map at
    all, or if ``config.max_attempts`` candidates are drawn without reaching
    the target.
    """
    target = rng.randint(config.min_rooms, config.max_rooms)
    layout = DungeonLayout(grid=grid, target_rooms=target)
    if target <= 0:
        return layout

    if (
        _placement_limit(grid.width, config.min_room_size) < NEAR_EDGE_MARGIN
        or _placement_limit(grid.height, config.min_room_size) < NEAR_EDGE_MARGIN
    ):
        logger.error(
            "Room size %d cannot fit a %dx%d map with margins",
            config.min_room_size,
            grid.width,
            grid.height,
        )
        raise UnsatisfiableConfigError(target, 0, 0)

    while len(layout.rooms) < target:
        if layout.attempts >= config.max_attempts:
            logger.error(
                "Room placement exhausted %d attempts (%d/%d rooms)",
                layout.attempts,
                len(layout.rooms),
                target,
            )
            raise UnsatisfiableConfigError(target, len(layout.rooms), layout.attempts)
        layout.attempts += 1

        w = rng.randint(config.min_room_size, config.max_room_size)
        h = rng.randint(config.min_room_size, config.max_room_size)
        limit_x = _placement_limit(grid.width, w)
        limit_y = _placement_limit(grid.height, h)
        if limit_x < NEAR_EDGE_MARGIN or limit_y < NEAR_EDGE_MARGIN:
            continue
        x = rng.randint(NEAR_EDGE_MARGIN, limit_x)
        y = rng.randint(NEAR_EDGE_MARGIN, limit_y)

        candidate = Rect(x, y, w, h)
        if any(candidate.intersects_with(room) for room in layout.rooms):
            continue
        carve_room(grid, candidate)
        layout.rooms.append(candidate)
        logger.debug("Accepted room %d: %s", len(layout.rooms), candidate)

    return layout


def connect_rooms(grid: TileGrid, rooms: List[Rect], rng: RNG) -> None:
    """Join each room to the next one in acceptance order with an L-shaped corridor."""
    for current, following in zip(rooms, rooms[1:]):
        cur = current.center()
        nxt = following.center()
        if rng.coin():
            # horizontal first, then vertical
            carve_h_tunnel(grid, nxt.x, cur.x, nxt.y)
            carve_v_tunnel(grid, nxt.y, cur.y, cur.x)
            logger.debug("Tunnel %s -> %s (horizontal first)", nxt, cur)
        else:
            carve_v_tunnel(grid, nxt.y, cur.y, nxt.x)
            carve_h_tunnel(grid, nxt.x, cur.x, cur.y)
            logger.debug("Tunnel %s -> %s (vertical first)", nxt, cur)


def generate_layout(
    width: int,
    height: int,
    tile_size: int,
    room_config: RoomConfig,
    rng: Optional[RNG] = None,
) -> DungeonLayout:
    """Generate a classified tile grid for a ``width`` x ``height`` pixel image."""
    if tile_size <= 0:
        raise ConfigError(f"tile_size must be positive, got {tile_size}")
    if width // tile_size <= 0 or height // tile_size <= 0:
        raise ConfigError(f"A {width}x{height} image holds no whole {tile_size}px tiles")
    if rng is None:
        rng = RNG()

    grid = TileGrid.for_image(width, height, tile_size)
    layout = place_rooms(grid, room_config, rng)
    connect_rooms(grid, layout.rooms, rng)
    logger.info(
        "Generated %dx%d map: %d rooms in %d attempts",
        grid.width,
        grid.height,
        len(layout.rooms),
        layout.attempts,
    )
    return layout


def create_map(
    width: int,
    height: int,
    tile_size: int,
    room_config: RoomConfig,
    rng: Optional[RNG] = None,
) -> TileGrid:
    return generate_layout(width, height, tile_size, room_config, rng).grid
