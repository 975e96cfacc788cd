import pytest

from mazegen.world import Color32, Direction, Node, Point2D, World


def _points(world):
    half = world.size // 2
    return [Point2D(x, y) for y in range(-half, half + 1) for x in range(-half, half + 1)]


_OPPOSITE = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}


def test_new_world_has_every_wall():
    world = World(5)
    assert all(world.wall(p, d) for p in _points(world) for d in Direction)


def test_new_world_cells_are_dark_gray():
    world = World(7)
    assert {world.node_color(p) for p in _points(world)} == {Color32.DARK_GRAY}


def test_east_wall_is_shared_with_right_neighbour():
    world = World(5)
    p = Point2D(0, 0)
    world.set_wall(p, Direction.EAST, False)
    assert world.wall(p + Point2D.RIGHT, Direction.WEST) is False
    assert world.wall(p, Direction.WEST) is True


def test_south_wall_is_shared_with_cell_below():
    world = World(5)
    p = Point2D(1, -1)
    world.set_wall(p, Direction.SOUTH, False)
    assert world.wall(p + Point2D.DOWN, Direction.NORTH) is False
    assert world.wall(p, Direction.NORTH) is True


def test_outer_border_walls_are_independent():
    world = World(5)
    corner = Point2D(2, 2)
    world.set_wall(corner, Direction.EAST, False)
    world.set_wall(corner, Direction.SOUTH, False)
    assert world.node(corner) == Node(north=True, east=False, south=False, west=True)
    assert world.node(Point2D(2, 1)).south is True


def test_node_round_trip():
    world = World(5)
    node = Node(north=False, east=True, south=False, west=True)
    world.set_node(Point2D(-1, 1), node)
    assert world.node(Point2D(-1, 1)) == node


def test_contains():
    world = World(5)
    assert world.contains(Point2D(-2, 2))
    assert not world.contains(Point2D(3, 0))
    assert not world.contains(Point2D(0, -3))


@pytest.mark.parametrize("point", [Point2D(3, 0), Point2D(0, -3)])
def test_outside_point_raises(point):
    world = World(5)
    with pytest.raises(IndexError):
        world.wall(point, Direction.NORTH)
    with pytest.raises(IndexError):
        world.node_color(point)
    with pytest.raises(IndexError):
        world.set_node_color(point, Color32.BLACK)


@pytest.mark.parametrize("size", [0, 4, -3])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        World(size)


def test_color_round_trip_and_clear():
    world = World(5)
    p = Point2D(2, -2)
    world.set_node_color(p, Color32.GREEN)
    world.set_wall(p, Direction.WEST, False)
    assert world.node_color(p) == Color32.GREEN
    world.clear()
    assert world.node_color(p) == Color32.DARK_GRAY
    assert world.wall(p, Direction.WEST) is True


def test_point_arithmetic_round_trip():
    a = Point2D(3, -4)
    b = Point2D(-7, 2)
    assert (a + b) - b == a
    assert Point2D.UP + Point2D.DOWN == Point2D(0, 0)


@pytest.mark.parametrize("direction", list(Direction))
def test_direction_deltas_lead_to_wall_sharing_neighbour(direction):
    world = World(5)
    p = Point2D(0, 0)
    world.set_wall(p, direction, False)
    neighbour = p + direction.delta
    assert world.contains(neighbour)
    assert world.wall(neighbour, _OPPOSITE[direction]) is False


def test_direction_deltas_match_points():
    world = World(3)
    centre = Point2D(0, 0)
    assert centre + Direction.NORTH.delta == Point2D(0, -1)
    assert centre + Direction.SOUTH.delta == Point2D(0, 1)
    assert centre + Direction.EAST.delta == Point2D(1, 0)
    assert centre + Direction.WEST.delta == Point2D(-1, 0)
    assert all(world.contains(centre + d.delta) for d in Direction)


def test_dark_keeps_alpha_and_darkens():
    shade = Color32.RED.dark()
    assert shade.a == Color32.RED.a
    assert shade.r < Color32.RED.r
    assert shade != Color32.RED