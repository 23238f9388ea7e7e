from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class WallKind(Enum):
    """Boundary classification of a carved tile, used to pick its sprite.

    FLOOR means passable with no wall on any side. A tile with no WallKind at
    all is untouched rock.
    """

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    FLOOR = "floor"

    @property
    def glyph(self) -> str:
        """A single-character visualization useful for logs/debug."""
        return _GLYPHS[self]


_GLYPHS = {
    WallKind.TOP: "^",
    WallKind.BOTTOM: "_",
    WallKind.LEFT: "[",
    WallKind.RIGHT: "]",
    WallKind.FLOOR: ".",
}
ROCK_GLYPH = "#"


@dataclass
class Tile:
    x: int
    y: int
    passable: bool = False
    boundary: Optional[WallKind] = None

    def mark_passable(self) -> None:
        self.passable = True

    def set_boundary(self, kind: WallKind) -> None:
        self.boundary = kind

    # Neighbor coordinates in grid units. They may fall outside the grid;
    # resolve them through TileGrid.get() which returns None there.
    def north(self) -> int:
        return self.y + 1

    def south(self) -> int:
        return self.y - 1

    def east(self) -> int:
        return self.x + 1

    def west(self) -> int:
        return self.x - 1

    @property
    def glyph(self) -> str:
        return self.boundary.glyph if self.boundary is not None else ROCK_GLYPH


class TileGrid:
    """
    Dense tile grid stored as one flat, column-major list.

    Every lookup goes through index(); nothing else in the package computes
    flat offsets. Out-of-range coordinates never wrap: get() reports them as
    "no tile" and tile() raises IndexError.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height
        # Column length; equals width on the square maps the layouts target.
        self.stride = height
        self._tiles: List[Tile] = [Tile(x, y) for x in range(width) for y in range(height)]

    @classmethod
    def for_image(cls, image_width: int, image_height: int, tile_size: int) -> "TileGrid":
        """Grid covering an image; remainder pixels past the last whole tile are unused."""
        return cls(image_width // tile_size, image_height // tile_size)

    # ---- Addressing ------------------------------------------------------
    def index(self, x: int, y: int) -> int:
        return x * self.stride + y

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Tile]:
        if not self.in_bounds(x, y):
            return None
        return self._tiles[self.index(x, y)]

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise IndexError(f"Tile out of bounds: ({x},{y}) not in [0,{self.width})x[0,{self.height})")
        return self._tiles[self.index(x, y)]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    # ---- Export / Compare -----------------------------------------------
    def to_str_lines(self) -> List[str]:
        """Glyph dump, highest y first so "north" reads as up."""
        return [
            "".join(self.tile(x, y).glyph for x in range(self.width))
            for y in reversed(range(self.height))
        ]

    def snapshot(self) -> Tuple[Tuple[bool, Optional[str]], ...]:
        """Deterministic, hashable snapshot of the tiles for equality tests."""
        return tuple(
            (t.passable, t.boundary.value if t.boundary is not None else None) for t in self._tiles
        )
