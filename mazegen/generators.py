"""Step-by-step maze generators working on a World."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from mazegen.world import Color32, Direction, Point2D, World

_PRIM_NEIGHBOUR_ORDER = (Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST)
_HUNT_NEIGHBOUR_ORDER = (Direction.WEST, Direction.NORTH, Direction.EAST, Direction.SOUTH)


def _carve(world: World, point: Point2D, towards: Point2D) -> None:
    """Remove the wall between two adjacent cells."""
    delta = towards - point
    for direction in Direction:
        if direction.delta == delta:
            world.set_wall(point, direction, False)
            return
    raise ValueError(f"{point} and {towards} are not adjacent")


def _cells(world: World):
    half = world.size // 2
    for y in range(-half, half + 1):
        for x in range(-half, half + 1):
            yield Point2D(x, y)


class MazeGenerator(ABC):
    """A maze generator advanced one step at a time."""

    name: str = ""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def step(self, world: World) -> bool:
        """Advance one step; return False once the maze is finished."""

    @abstractmethod
    def clear(self, world: World) -> None:
        """Forget all progress so generation can start again on the world."""


class PrimGenerator(MazeGenerator):
    """Randomised Prim's algorithm, tracking progress through cell colours."""

    name = "Prim"

    VISITED = Color32.BLACK
    QUEUED = Color32.DARK_RED
    UNVISITED = Color32.DARK_GRAY

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.to_be_visited: list[Point2D] = []
        self.initialized = False

    def step(self, world: World) -> bool:
        half = world.size // 2
        if not self.initialized:
            self.initialized = True
            start = Point2D(-half, -half)
            self.to_be_visited.append(start)
            world.set_node_color(start, self.QUEUED)
            return True

        if not self.to_be_visited:
            return False

        current = self.to_be_visited.pop(self.rng.randrange(len(self.to_be_visited)))
        world.set_node_color(current, self.VISITED)

        for direction in Direction:
            neighbour = current + direction.delta
            if world.contains(neighbour) and world.node_color(neighbour) == self.UNVISITED:
                self.to_be_visited.append(neighbour)
                world.set_node_color(neighbour, self.QUEUED)

        visited = [
            current + direction.delta
            for direction in _PRIM_NEIGHBOUR_ORDER
            if world.contains(current + direction.delta)
            and world.node_color(current + direction.delta) == self.VISITED
            and world.wall(current, direction)
        ]
        if visited:
            _carve(world, current, self.rng.choice(visited))
        return True

    def clear(self, world: World) -> None:
        self.to_be_visited.clear()
        self.initialized = False


class _DepthFirstGenerator(MazeGenerator):
    """Shared state for generators that walk a stack of cells."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__(rng)
        self.stack: list[Point2D] = []
        self.visited: set[Point2D] = set()

    def _reset(self) -> None:
        self.stack.clear()
        self.visited.clear()

    def _first_unvisited(self, world: World) -> Point2D | None:
        return next((p for p in _cells(world) if p not in self.visited), None)

    def _visitables(self, world: World, point: Point2D) -> list[Point2D]:
        return [
            point + direction.delta
            for direction in Direction
            if world.contains(point + direction.delta)
            and point + direction.delta not in self.visited
            and world.wall(point, direction)
        ]

    def _go_deeper(self, world: World, current: Point2D, visitables: list[Point2D]) -> None:
        following = self.rng.choice(visitables)
        world.set_node_color(following, Color32.GREEN)
        self.stack.append(following)
        _carve(world, current, following)


class RecursiveBacktrackerGenerator(_DepthFirstGenerator):
    """Depth-first search that backtracks one cell at a time."""

    name = "Recursive Back-Tracker"

    def step(self, world: World) -> bool:
        if not self.stack:
            start = self._first_unvisited(world)
            if start is None:
                return False
            self.stack.append(start)
            world.set_node_color(start, Color32.RED.dark())

        current = self.stack[-1]
        self.visited.add(current)
        world.set_node_color(current, Color32.RED.dark())

        visitables = self._visitables(world, current)
        if not visitables:
            self.stack.pop()
            world.set_node_color(current, Color32.BLACK)
        else:
            self._go_deeper(world, current, visitables)
        return True

    def clear(self, world: World) -> None:
        self._reset()


class HuntAndKillGenerator(_DepthFirstGenerator):
    """Random walk that, when stuck, hunts for the next unvisited cell."""

    name = "HuntAndKill"

    def _visited_neighbours(self, world: World, point: Point2D) -> list[Point2D]:
        return [
            point + direction.delta
            for direction in _HUNT_NEIGHBOUR_ORDER
            if world.contains(point + direction.delta)
            and point + direction.delta in self.visited
            and world.wall(point, direction)
        ]

    def step(self, world: World) -> bool:
        if not self.stack:
            start = self._first_unvisited(world)
            if start is None:
                return False
            self.stack.append(start)
            half = world.size // 2
            if start != Point2D(-half, -half):
                neighbours = self._visited_neighbours(world, start)
                if not neighbours:
                    return False
                _carve(world, start, self.rng.choice(neighbours))

        current = self.stack[-1]
        self.visited.add(current)
        world.set_node_color(current, Color32.RED.dark())

        visitables = self._visitables(world, current)
        if not visitables:
            for point in self.stack:
                world.set_node_color(point, Color32.BLACK)
            self.stack.clear()
        else:
            self._go_deeper(world, current, visitables)
        return True

    def clear(self, world: World) -> None:
        self._reset()