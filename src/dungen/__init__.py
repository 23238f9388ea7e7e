"""
dungen package root.

Procedural tile-dungeon generation: room placement, corridor carving and
wall classification, plus the YAML config layer and the Pillow renderer
that turn a classified grid into an image.
"""

__version__ = "0.1.0"

from .generator import DungeonLayout, RoomConfig, create_map, generate_layout
from .tiles import Tile, TileGrid, WallKind

__all__ = [
    "DungeonLayout",
    "RoomConfig",
    "Tile",
    "TileGrid",
    "WallKind",
    "create_map",
    "generate_layout",
]
