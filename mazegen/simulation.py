"""Drives a maze generator over a world, step by step or on a timer."""

from __future__ import annotations

import time
from collections.abc import Iterable

from mazegen.generators import (
    HuntAndKillGenerator,
    MazeGenerator,
    PrimGenerator,
    RecursiveBacktrackerGenerator,
)
from mazegen.world import World


class MazeSimulation:
    """A world together with a choice of generators and the timing state."""

    MIN_SIZE = 5
    MAX_SIZE = 29

    def __init__(self, size: int = 21, generators: Iterable[MazeGenerator] | None = None) -> None:
        self.world = World(size)
        if generators is None:
            generators = [PrimGenerator(), RecursiveBacktrackerGenerator(), HuntAndKillGenerator()]
        self.generators = list(generators)
        if not self.generators:
            raise ValueError("at least one generator is required")
        self.generator_index = 0
        self.is_simulating = False
        self.time_between_ticks = 0.0
        self.time_for_next_tick = 0.0
        self.move_duration = 0
        self.total_time = 0
        self.clear()

    @property
    def generator(self) -> MazeGenerator:
        """The generator currently in use."""
        return self.generators[self.generator_index]

    def select_generator(self, index: int) -> None:
        """Switch to another generator and start over."""
        if not 0 <= index < len(self.generators):
            raise IndexError(f"no generator at index {index}")
        self.generator_index = index
        self.clear()

    def resize(self, size: int) -> int:
        """Change the side length, snapped to 4k+1 within the allowed range."""
        size = min(max(size, self.MIN_SIZE), self.MAX_SIZE)
        size = (size // 4) * 4 + 1
        if size != self.world.size:
            self.world = World(size)
            self.clear()
        return self.world.size

    def play(self) -> None:
        """Start stepping automatically on update."""
        self.is_simulating = True

    def pause(self) -> None:
        """Stop stepping automatically."""
        self.is_simulating = False

    def step(self) -> bool:
        """Run one generator step, timing it; pause when the maze is done."""
        start = time.perf_counter_ns()
        advanced = self.generator.step(self.world)
        if not advanced:
            self.is_simulating = False
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.total_time += self.move_duration
        return advanced

    def update(self, delta_time: float) -> None:
        """Advance the tick timer by delta_time seconds while playing."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ticks

    def clear(self) -> None:
        """Stop, restore the world and reset every generator and timer."""
        self.is_simulating = False
        self.world.clear()
        for generator in self.generators:
            generator.clear(self.world)
        self.total_time = 0
        self.move_duration = 0

    def run(self) -> int:
        """Step until the generator finishes; return the number of steps taken."""
        steps = 0
        self.play()
        while self.is_simulating:
            self.step()
            steps += 1
        return steps