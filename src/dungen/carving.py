"""Room and corridor carving with wall classification.

All three carvers mutate the grid in place and only ever widen the passable
area: tiles are marked passable, never un-marked. Classification is
last-writer-wins, so call order matters and is fixed by the generator.
"""
from __future__ import annotations

from .geometry import Rect
from .tiles import TileGrid, WallKind

# Neighbor states a horizontal corridor may overwrite. TOP and FLOOR are kept.
_H_OVERWRITABLE = (WallKind.BOTTOM, WallKind.RIGHT, WallKind.LEFT, None)
# Neighbor states a vertical corridor may overwrite.
_V_OVERWRITABLE = (WallKind.RIGHT, WallKind.LEFT, None)


def carve_room(grid: TileGrid, room: Rect) -> None:
    """Make every cell of ``room`` passable and classify its edge rings.

    Rooms touching the grid boundary are left all FLOOR. Otherwise the top and
    bottom rows become TOP/BOTTOM and the outer columns become RIGHT/LEFT; the
    column check runs second so corners end up RIGHT/LEFT.
    """
    refine = (
        room.x > 0
        and room.y > 0
        and room.right() < grid.width
        and room.top() < grid.height
    )
    for x, y in room.cells():
        tile = grid.tile(x, y)
        tile.mark_passable()
        tile.set_boundary(WallKind.FLOOR)
        if not refine:
            continue

        if tile.north() == room.top():
            tile.set_boundary(WallKind.TOP)
        elif tile.south() == room.y - 1:
            tile.set_boundary(WallKind.BOTTOM)

        if tile.east() == room.right():
            tile.set_boundary(WallKind.RIGHT)
        elif tile.west() == room.x - 1:
            tile.set_boundary(WallKind.LEFT)


def carve_h_tunnel(grid: TileGrid, x1: int, x2: int, y: int) -> None:
    """Carve row ``y`` over ``[min(x1, x2), max(x1, x2))`` and re-derive its neighbors.

    North neighbors become TOP and south neighbors BOTTOM unless already TOP or
    FLOOR. Unclassified east/west neighbors are capped with TOP only for the
    first carved cell.
    """
    min_x, max_x = min(x1, x2), max(x1, x2)
    for x in range(min_x, max_x):
        tile = grid.tile(x, y)
        tile.mark_passable()
        tile.set_boundary(WallKind.FLOOR)

        if x == min_x:
            for side_x in (tile.east(), tile.west()):
                side = grid.get(side_x, y)
                if side is not None and side.boundary is None:
                    side.set_boundary(WallKind.TOP)

        north = grid.get(x, tile.north())
        if north is not None and north.boundary in _H_OVERWRITABLE:
            north.set_boundary(WallKind.TOP)

        south = grid.get(x, tile.south())
        if south is not None and south.boundary in _H_OVERWRITABLE:
            south.set_boundary(WallKind.BOTTOM)


def carve_v_tunnel(grid: TileGrid, y1: int, y2: int, x: int) -> None:
    """Carve column ``x`` over ``[min(y1, y2), max(y1, y2))``.

    Only unclassified or side-wall neighbors are rewritten: east ones to RIGHT,
    west ones to LEFT.
    """
    min_y, max_y = min(y1, y2), max(y1, y2)
    for y in range(min_y, max_y):
        tile = grid.tile(x, y)
        tile.mark_passable()
        tile.set_boundary(WallKind.FLOOR)

        east = grid.get(tile.east(), y)
        if east is not None and east.boundary in _V_OVERWRITABLE:
            east.set_boundary(WallKind.RIGHT)

        west = grid.get(tile.west(), y)
        if west is not None and west.boundary in _V_OVERWRITABLE:
            west.set_boundary(WallKind.LEFT)
