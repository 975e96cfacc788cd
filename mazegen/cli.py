"""Command line entry point: generate a maze and print it as text."""

from __future__ import annotations

import argparse
import random
import sys

from mazegen.generators import (
    HuntAndKillGenerator,
    MazeGenerator,
    PrimGenerator,
    RecursiveBacktrackerGenerator,
)
from mazegen.simulation import MazeSimulation
from mazegen.world import Direction, Point2D, World

GENERATORS: dict[str, type[MazeGenerator]] = {
    "prim": PrimGenerator,
    "backtracker": RecursiveBacktrackerGenerator,
    "hunt-and-kill": HuntAndKillGenerator,
}


def _wall_segment(present: bool) -> str:
    return "---" if present else "   "


def render(world: World) -> str:
    """Draw the maze walls as ASCII art, one text row per wall row and cell row."""
    half = world.size // 2
    coords = range(-half, half + 1)
    lines: list[str] = []
    for y in coords:
        row = [Point2D(x, y) for x in coords]
        lines.append(
            "+" + "".join(_wall_segment(world.wall(p, Direction.NORTH)) + "+" for p in row)
        )
        cells = "".join(("|" if world.wall(p, Direction.WEST) else " ") + "   " for p in row)
        lines.append(cells + ("|" if world.wall(row[-1], Direction.EAST) else " "))
    bottom = [Point2D(x, half) for x in coords]
    lines.append(
        "+" + "".join(_wall_segment(world.wall(p, Direction.SOUTH)) + "+" for p in bottom)
    )
    return "\n".join(lines)


def _odd_size(text: str) -> int:
    value = int(text)
    if value < 1 or value % 2 == 0:
        raise argparse.ArgumentTypeError(f"size must be a positive odd number, got {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Generate a maze to completion and print it."""
    parser = argparse.ArgumentParser(prog="mazegen", description="Generate and print a maze.")
    parser.add_argument("--size", type=_odd_size, default=21, help="side length (odd)")
    parser.add_argument(
        "--generator", choices=sorted(GENERATORS), default="prim", help="algorithm to use"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    generator = GENERATORS[args.generator](random.Random(args.seed))
    simulation = MazeSimulation(args.size, [generator])
    simulation.run()
    print(render(simulation.world))
    return 0


if __name__ == "__main__":
    sys.exit(main())