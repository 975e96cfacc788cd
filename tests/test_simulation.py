import random

import pytest

from mazegen.generators import PrimGenerator, RecursiveBacktrackerGenerator
from mazegen.simulation import MazeSimulation
from mazegen.world import Color32, Direction, Point2D


def _points(world):
    half = world.size // 2
    return [Point2D(x, y) for y in range(-half, half + 1) for x in range(-half, half + 1)]


def _openings(world):
    return sum(
        1
        for p in _points(world)
        for d in (Direction.EAST, Direction.SOUTH)
        if world.contains(p + d.delta) and not world.wall(p, d)
    )


def test_default_generators_in_order():
    sim = MazeSimulation()
    assert [g.name for g in sim.generators] == ["Prim", "Recursive Back-Tracker", "HuntAndKill"]
    assert sim.world.size == 21
    assert sim.generator.name == "Prim"


@pytest.mark.parametrize("requested", [12, 100, 1, 29, 5])
def test_resize_snaps_into_range(requested):
    sim = MazeSimulation(5)
    size = sim.resize(requested)
    assert sim.world.size == size
    assert MazeSimulation.MIN_SIZE <= size <= MazeSimulation.MAX_SIZE
    assert size % 4 == 1


def test_resize_to_twelve_gives_thirteen():
    sim = MazeSimulation(5)
    assert sim.resize(12) == 13


def test_run_builds_a_complete_maze():
    sim = MazeSimulation(9, [PrimGenerator(random.Random(4))])
    steps = sim.run()
    assert steps > 0
    assert sim.is_simulating is False
    assert _openings(sim.world) == sim.world.size ** 2 - 1
    assert sim.total_time >= sim.move_duration >= 0
    assert sim.step() is False


def test_update_does_nothing_while_paused():
    sim = MazeSimulation(5, [PrimGenerator(random.Random(0))])
    sim.update(10.0)
    assert sim.world.node_color(Point2D(-2, -2)) == Color32.DARK_GRAY


def test_update_steps_when_timer_expires():
    sim = MazeSimulation(5, [PrimGenerator(random.Random(0))])
    sim.time_between_ticks = 1.0
    sim.play()
    sim.update(0.5)
    assert sim.world.node_color(Point2D(-2, -2)) == Color32.DARK_RED
    assert sim.time_for_next_tick == sim.time_between_ticks
    sim.update(0.5)
    assert sim.generator.to_be_visited == [Point2D(-2, -2)]


def test_clear_restores_world_and_stops():
    sim = MazeSimulation(5, [RecursiveBacktrackerGenerator(random.Random(0))])
    sim.run()
    sim.play()
    sim.clear()
    assert sim.is_simulating is False
    assert sim.total_time == 0
    assert _openings(sim.world) == 0
    assert sim.step() is True


def test_select_generator_switches_and_clears():
    sim = MazeSimulation(5)
    sim.step()
    sim.step()
    sim.select_generator(2)
    assert sim.generator.name == "HuntAndKill"
    assert {sim.world.node_color(p) for p in _points(sim.world)} == {Color32.DARK_GRAY}


@pytest.mark.parametrize("index", [-1, 3])
def test_select_generator_out_of_range(index):
    sim = MazeSimulation(5)
    with pytest.raises(IndexError):
        sim.select_generator(index)


def test_empty_generator_list_rejected():
    with pytest.raises(ValueError):
        MazeSimulation(5, [])