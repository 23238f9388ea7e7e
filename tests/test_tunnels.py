from dungen.carving import carve_h_tunnel, carve_room, carve_v_tunnel
from dungen.generator import connect_rooms
from dungen.geometry import Rect
from dungen.tiles import TileGrid, WallKind

T, B, L, R, F = WallKind.TOP, WallKind.BOTTOM, WallKind.LEFT, WallKind.RIGHT, WallKind.FLOOR


def kind(grid, x, y):
    return grid.tile(x, y).boundary


def test_h_tunnel_carves_half_open_span_in_either_direction():
    grid = TileGrid(10, 10)
    carve_h_tunnel(grid, 6, 2, 4)
    carved = {(t.x, t.y) for t in grid if t.passable}
    assert carved == {(2, 4), (3, 4), (4, 4), (5, 4)}
    assert all(kind(grid, x, 4) is F for x in range(2, 6))


def test_h_tunnel_caps_only_the_first_cell():
    grid = TileGrid(10, 10)
    carve_h_tunnel(grid, 2, 6, 4)
    assert kind(grid, 1, 4) is T
    # The far end gets no cap.
    assert kind(grid, 6, 4) is None
    assert not grid.tile(1, 4).passable


def test_h_tunnel_walls_above_and_below():
    grid = TileGrid(10, 10)
    carve_h_tunnel(grid, 2, 6, 4)
    for x in range(2, 6):
        assert kind(grid, x, 5) is T
        assert kind(grid, x, 3) is B
        assert not grid.tile(x, 5).passable
        assert not grid.tile(x, 3).passable


def test_h_tunnel_neighbor_precedence():
    grid = TileGrid(10, 10)
    grid.tile(2, 5).set_boundary(F)
    grid.tile(2, 5).mark_passable()
    grid.tile(3, 5).set_boundary(R)
    grid.tile(4, 5).set_boundary(T)
    grid.tile(2, 3).set_boundary(L)
    grid.tile(3, 3).set_boundary(T)
    grid.tile(4, 3).set_boundary(F)
    carve_h_tunnel(grid, 2, 5, 4)

    assert kind(grid, 2, 5) is F
    assert grid.tile(2, 5).passable
    assert kind(grid, 3, 5) is T
    assert kind(grid, 4, 5) is T
    assert kind(grid, 2, 3) is B
    assert kind(grid, 3, 3) is T
    assert kind(grid, 4, 3) is F


def test_h_tunnel_cap_leaves_classified_sides_alone():
    grid = TileGrid(10, 10)
    grid.tile(1, 4).set_boundary(R)
    carve_h_tunnel(grid, 2, 5, 4)
    assert kind(grid, 1, 4) is R


def test_v_tunnel_walls_left_and_right():
    grid = TileGrid(10, 10)
    grid.tile(4, 2).set_boundary(T)
    grid.tile(2, 3).set_boundary(R)
    grid.tile(4, 1).set_boundary(F)
    carve_v_tunnel(grid, 4, 1, 3)

    carved = {(t.x, t.y) for t in grid if t.passable}
    assert carved == {(3, 1), (3, 2), (3, 3)}
    assert kind(grid, 4, 1) is F
    assert kind(grid, 4, 2) is T
    assert kind(grid, 4, 3) is R
    assert kind(grid, 2, 1) is L
    assert kind(grid, 2, 2) is L
    assert kind(grid, 2, 3) is L
    # Nothing above or below the span is touched.
    assert kind(grid, 3, 4) is None
    assert kind(grid, 3, 0) is None


def test_tunnels_on_grid_edge_skip_missing_neighbors():
    grid = TileGrid(5, 5)
    carve_h_tunnel(grid, 0, 3, 0)
    carve_v_tunnel(grid, 0, 4, 0)
    carve_h_tunnel(grid, 1, 5, 4)
    carve_v_tunnel(grid, 1, 4, 4)
    assert grid.tile(0, 0).passable
    assert grid.tile(4, 3).passable
    assert grid.tile(4, 1).boundary is F


def test_degenerate_tunnel_carves_nothing():
    grid = TileGrid(5, 5)
    carve_h_tunnel(grid, 2, 2, 2)
    carve_v_tunnel(grid, 3, 3, 2)
    assert all(t.boundary is None for t in grid)


def test_two_rooms_horizontal_first(scripted_rng):
    grid = TileGrid(10, 10)
    a = Rect(0, 0, 2, 2)
    b = Rect(4, 4, 2, 2)
    carve_room(grid, a)
    carve_room(grid, b)
    assert (a.center().x, a.center().y) == (1, 1)
    assert (b.center().x, b.center().y) == (5, 5)

    connect_rooms(grid, [a, b], scripted_rng(coins=[True]))

    # horizontal leg at the next room's y, then vertical leg at this room's x
    for x in range(1, 5):
        assert grid.tile(x, 5).passable
    for y in range(1, 5):
        assert grid.tile(1, y).passable

    assert kind(grid, 0, 5) is T  # first-cell cap
    for x in range(1, 5):
        assert kind(grid, x, 6) is T
    assert kind(grid, 2, 4) is B
    assert kind(grid, 3, 4) is B
    # Room b's lower-left corner was LEFT, the corridor rewrote it.
    assert kind(grid, 4, 4) is B
    assert kind(grid, 4, 5) is F
    # v leg: east side gets RIGHT unless already BOTTOM, west side LEFT unless FLOOR
    assert kind(grid, 2, 2) is R
    assert kind(grid, 2, 3) is R
    assert kind(grid, 0, 1) is F
    assert kind(grid, 0, 2) is L
    assert kind(grid, 0, 4) is L
    assert kind(grid, 1, 4) is F


def test_two_rooms_vertical_first(scripted_rng):
    grid = TileGrid(10, 10)
    a = Rect(0, 0, 2, 2)
    b = Rect(4, 4, 2, 2)
    connect_rooms(grid, [a, b], scripted_rng(coins=[False]))

    # vertical leg at the next room's x, then horizontal leg at this room's y
    assert {(t.x, t.y) for t in grid if t.passable} == {
        (5, 1), (5, 2), (5, 3), (5, 4),
        (1, 1), (2, 1), (3, 1), (4, 1),
    }


def test_single_room_needs_no_tunnel(scripted_rng):
    grid = TileGrid(10, 10)
    connect_rooms(grid, [Rect(2, 2, 3, 3)], scripted_rng())
    assert all(not t.passable for t in grid)
