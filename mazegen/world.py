"""Grid of maze cells with shared walls and per-cell colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


@dataclass(frozen=True)
class Point2D:
    """An integer grid coordinate; y grows downwards."""

    x: int
    y: int

    UP: ClassVar[Point2D]
    DOWN: ClassVar[Point2D]
    LEFT: ClassVar[Point2D]
    RIGHT: ClassVar[Point2D]

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(self.x - other.x, self.y - other.y)


Point2D.UP = Point2D(0, -1)
Point2D.DOWN = Point2D(0, 1)
Point2D.LEFT = Point2D(-1, 0)
Point2D.RIGHT = Point2D(1, 0)


@dataclass(frozen=True)
class Color32:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color32]
    DARK_GRAY: ClassVar[Color32]
    RED: ClassVar[Color32]
    DARK_RED: ClassVar[Color32]
    GREEN: ClassVar[Color32]

    def dark(self) -> Color32:
        """Return a darker shade of this colour with the same alpha."""
        return Color32(self.r // 2, self.g // 2, self.b // 2, self.a)


Color32.BLACK = Color32(0, 0, 0)
Color32.DARK_GRAY = Color32(64, 64, 64)
Color32.RED = Color32(255, 0, 0)
Color32.DARK_RED = Color32(139, 0, 0)
Color32.GREEN = Color32(0, 255, 0)


class Direction(Enum):
    """The four sides of a cell."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def delta(self) -> Point2D:
        """The offset to the neighbouring cell on this side."""
        return Point2D(*self.value)


@dataclass
class Node:
    """The four walls around one cell."""

    north: bool = True
    east: bool = True
    south: bool = True
    west: bool = True


class World:
    """A square maze of odd side length centred on the origin.

    Walls are stored once: a cell's east wall is the west wall of its right
    neighbour and its south wall is the north wall of the cell below.
    """

    def __init__(self, size: int = 11) -> None:
        if size < 1 or size % 2 == 0:
            raise ValueError(f"maze size must be a positive odd number, got {size}")
        self.size = size
        self._walls: list[bool] = []
        self._colors: list[Color32] = []
        self.clear()

    @property
    def _half(self) -> int:
        return self.size // 2

    @property
    def _stride(self) -> int:
        return (self.size + 1) * 2

    def clear(self) -> None:
        """Put back every wall and paint every cell dark grey."""
        stride = self._stride
        self._walls = [
            not (
                i % stride == stride - 2  # north element past the last column
                or (i // stride == self.size and i % 2 == 1)  # west element below the last row
            )
            for i in range(stride * (self.size + 1))
        ]
        self._colors = [Color32.DARK_GRAY] * (self.size * self.size)

    def contains(self, point: Point2D) -> bool:
        """Whether the point lies on the board."""
        half = self._half
        return abs(point.x) <= half and abs(point.y) <= half

    def _require(self, point: Point2D) -> None:
        if not self.contains(point):
            raise IndexError(f"{point} is outside a maze of size {self.size}")

    def _wall_index(self, point: Point2D, direction: Direction) -> int:
        self._require(point)
        half = self._half
        base = (point.y + half) * self._stride + (point.x + half) * 2
        offset = {
            Direction.NORTH: 0,
            Direction.WEST: 1,
            Direction.EAST: 3,
            Direction.SOUTH: self._stride,
        }[direction]
        return base + offset

    def wall(self, point: Point2D, direction: Direction) -> bool:
        """Whether the cell has a wall on the given side."""
        return self._walls[self._wall_index(point, direction)]

    def set_wall(self, point: Point2D, direction: Direction, state: bool) -> None:
        """Raise or remove the wall on the given side of a cell."""
        self._walls[self._wall_index(point, direction)] = bool(state)

    def node(self, point: Point2D) -> Node:
        """The walls around a cell."""
        return Node(*(self.wall(point, direction) for direction in Direction))

    def set_node(self, point: Point2D, node: Node) -> None:
        """Set all four walls around a cell."""
        self.set_wall(point, Direction.NORTH, node.north)
        self.set_wall(point, Direction.EAST, node.east)
        self.set_wall(point, Direction.SOUTH, node.south)
        self.set_wall(point, Direction.WEST, node.west)

    def _color_index(self, point: Point2D) -> int:
        self._require(point)
        half = self._half
        return (point.y + half) * self.size + point.x + half

    def node_color(self, point: Point2D) -> Color32:
        """The colour a cell is painted."""
        return self._colors[self._color_index(point)]

    def set_node_color(self, point: Point2D, color: Color32) -> None:
        """Paint a cell."""
        self._colors[self._color_index(point)] = color