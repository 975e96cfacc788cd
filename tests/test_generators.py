import random

import pytest

from mazegen.generators import (
    HuntAndKillGenerator,
    MazeGenerator,
    PrimGenerator,
    RecursiveBacktrackerGenerator,
)
from mazegen.world import Color32, Direction, Point2D, World

GENERATORS = [PrimGenerator, RecursiveBacktrackerGenerator, HuntAndKillGenerator]


def _points(world):
    half = world.size // 2
    return [Point2D(x, y) for y in range(-half, half + 1) for x in range(-half, half + 1)]


def _run(generator, world, limit=100_000):
    generator.clear(world)
    steps = 0
    while generator.step(world):
        steps += 1
        assert steps < limit
    return steps


def _walls_snapshot(world):
    return [(p, d, world.wall(p, d)) for p in _points(world) for d in Direction]


def _is_perfect_maze(world):
    points = _points(world)
    openings = sum(
        1
        for p in points
        for d in (Direction.EAST, Direction.SOUTH)
        if world.contains(p + d.delta) and not world.wall(p, d)
    )
    border_intact = all(
        world.wall(p, d) for p in points for d in Direction if not world.contains(p + d.delta)
    )
    seen = {points[0]}
    pending = [points[0]]
    while pending:
        p = pending.pop()
        for d in Direction:
            q = p + d.delta
            if world.contains(q) and not world.wall(p, d) and q not in seen:
                seen.add(q)
                pending.append(q)
    return openings == len(points) - 1 and border_intact and len(seen) == len(points)


@pytest.mark.parametrize("cls", GENERATORS)
@pytest.mark.parametrize("size", [1, 5, 9])
@pytest.mark.parametrize("seed", [0, 7])
def test_generators_build_perfect_mazes(cls, size, seed):
    world = World(size)
    _run(cls(random.Random(seed)), world)
    assert _is_perfect_maze(world)


@pytest.mark.parametrize("cls", GENERATORS)
def test_finished_maze_is_painted_black(cls):
    world = World(5)
    _run(cls(random.Random(3)), world)
    assert {world.node_color(p) for p in _points(world)} == {Color32.BLACK}


@pytest.mark.parametrize("cls", GENERATORS)
def test_same_seed_gives_same_maze(cls):
    first, second = World(7), World(7)
    _run(cls(random.Random(11)), first)
    _run(cls(random.Random(11)), second)
    assert _walls_snapshot(first) == _walls_snapshot(second)


@pytest.mark.parametrize("cls", GENERATORS)
def test_step_after_completion_keeps_returning_false(cls):
    world = World(5)
    generator = cls(random.Random(1))
    _run(generator, world)
    assert generator.step(world) is False


def test_prim_first_step_queues_the_corner():
    world = World(5)
    generator = PrimGenerator(random.Random(0))
    assert generator.step(world) is True
    assert world.node_color(Point2D(-2, -2)) == Color32.DARK_RED
    assert generator.to_be_visited == [Point2D(-2, -2)]


def test_backtracker_first_step_marks_the_corner_visited():
    world = World(5)
    generator = RecursiveBacktrackerGenerator(random.Random(0))
    generator.step(world)
    assert Point2D(-2, -2) in generator.visited
    assert world.node_color(Point2D(-2, -2)) == Color32.RED.dark()
    assert len(generator.stack) == 2


@pytest.mark.parametrize(
    "cls, expected",
    [
        (PrimGenerator, "Prim"),
        (RecursiveBacktrackerGenerator, "Recursive Back-Tracker"),
        (HuntAndKillGenerator, "HuntAndKill"),
    ],
)
def test_generator_names(cls, expected):
    generator = cls(random.Random(0))
    assert generator.name == expected


def test_base_generator_is_abstract():
    with pytest.raises(TypeError):
        MazeGenerator()