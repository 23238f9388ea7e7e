from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import TextureError
from .tiles import TileGrid, WallKind

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]


@dataclass(frozen=True)
class Atlas:
    """Pixel offsets of the four sprites inside the texture image."""

    wall_h: Offset
    wall_v_right: Offset
    wall_v_left: Offset
    floor: Offset

    def offset_for(self, kind: Optional[WallKind]) -> Optional[Offset]:
        """Sprite offset for a classification; None means nothing is drawn."""
        if kind is None:
            return None
        if kind in (WallKind.TOP, WallKind.BOTTOM):
            return self.wall_h
        if kind is WallKind.RIGHT:
            return self.wall_v_right
        if kind is WallKind.LEFT:
            return self.wall_v_left
        return self.floor


def load_texture(path: os.PathLike | str) -> Image.Image:
    p = Path(path)
    if not p.exists():
        raise TextureError(f"Texture file not found: {p}")
    try:
        with Image.open(p) as img:
            texture = img.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        raise TextureError(f"Unable to read texture {p}: {e}") from e
    logger.debug("Loaded texture %s (%dx%d)", p, texture.width, texture.height)
    return texture


def _crop_sprites(texture: Image.Image, atlas: Atlas, tile_size: int) -> Dict[WallKind, Image.Image]:
    sprites: Dict[WallKind, Image.Image] = {}
    for kind in WallKind:
        ox, oy = atlas.offset_for(kind)
        if ox + tile_size > texture.width or oy + tile_size > texture.height:
            raise TextureError(
                f"Sprite for {kind.value} at ({ox},{oy}) size {tile_size} lies outside "
                f"the {texture.width}x{texture.height} texture"
            )
        sprites[kind] = texture.crop((ox, oy, ox + tile_size, oy + tile_size))
    return sprites


def render_map(
    grid: TileGrid,
    texture: Image.Image,
    atlas: Atlas,
    width: int,
    height: int,
    tile_size: int,
) -> Image.Image:
    """Composite a classified grid into a ``width`` x ``height`` RGBA image.

    Each classified tile gets the matching ``tile_size`` square copied from the
    atlas at ``(x * tile_size, y * tile_size)``. Rock tiles stay transparent.
    """
    sprites = _crop_sprites(texture, atlas, tile_size)
    image = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    drawn = 0
    for tile in grid:
        if tile.boundary is None:
            continue
        image.paste(sprites[tile.boundary], (tile.x * tile_size, tile.y * tile_size))
        drawn += 1
    logger.info("Rendered %d of %d tiles into %dx%d image", drawn, len(grid), width, height)
    return image


def save_image(image: Image.Image, path: os.PathLike | str) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    image.save(out)
    logger.info("Saved map image to %s", out)
    return out
