# mazegen

Generate mazes one step at a time and print them as text.

A maze lives on a square `World` (`mazegen.world`) of odd side length. Its cells
are addressed by `Point2D` coordinates centred on the origin, so a world of
size 11 covers `x` and `y` from -5 to 5. Each cell has walls on the four sides
of `Direction` (`NORTH`, `EAST`, `SOUTH`, `WEST`), read with `wall` and changed
with `set_wall`, or all at once as a `Node` with `node` and `set_node`.
Neighbouring cells share their walls. Each cell also has a `Color32` colour
(`node_color` / `set_node_color`) that the generators use to mark progress.
`clear` puts back every wall and paints every cell dark grey. Asking about a
point outside the board raises `IndexError`.

## Generators

`mazegen.generators` provides three generators:

- `PrimGenerator`: randomised Prim's algorithm
- `RecursiveBacktrackerGenerator`: depth-first search that backtracks one cell at a time
- `HuntAndKillGenerator`: random walks that, when stuck, restart from the first
  unvisited cell and join it to the visited region

Each takes an optional `random.Random` for repeatable results. Call
`clear(world)` before starting. Each call to `step(world)` makes one move and
returns `False` once the maze is finished.

## Simulation

`MazeSimulation` (`mazegen.simulation`) holds a world and a list of generators.
By default these are Prim, recursive backtracker and hunt-and-kill, and the
default size is 21. It offers:

- `select_generator(index)` switches generator and starts over.
- `resize(size)` clamps the size to 5–29, snaps it to the form 4k+1 and returns
  the new size.
- `play()` and `pause()` turn automatic stepping on and off.
- `step()` makes one timed move. `move_duration` and `total_time` are given in
  microseconds.
- `update(delta_time)` counts down the tick timer while playing and steps when
  it runs out.
- `clear()` stops the simulation and resets the world, the generators and the
  timers.
- `run()` steps until the generator finishes and returns the number of steps.

## Command line

```
mazegen
mazegen --size 15 --generator backtracker --seed 7
```

This generates a maze to completion and prints it as ASCII art.

Options:

- `--size`: a positive odd side length, 21 by default.
- `--generator`: one of `prim`, `backtracker` or `hunt-and-kill`. The default is `prim`.
- `--seed`: an integer random seed.

The same drawing is available in code as `mazegen.cli.render(world)`.

## Library use

```python
import random

from mazegen.cli import render
from mazegen.generators import RecursiveBacktrackerGenerator
from mazegen.world import World

world = World(11)
generator = RecursiveBacktrackerGenerator(random.Random(1))
generator.clear(world)
while generator.step(world):
    pass
print(render(world))
```

## Voronoi diagrams

`mazegen.fortune.build(sites, x_bound, y_bound)` runs Fortune's sweep-line
algorithm. It returns a `Graph` (`mazegen.graph`) whose `sites`, `edges` and
`cells` are clipped to the box `[0, x_bound] x [0, y_bound]`. Sites may be given
as `(x, y)` pairs, `Vertex` or `Site` objects. A site equal to the one right
before it is ignored. Edges that fall outside the box are kept, but their end
points are set to `Vertex.UNDEFINED`, which is falsy. The tree that holds the
beach line and the circle events is `mazegen.rbtree.RBTree`. Its nodes are also
linked in order, and the tree can be iterated.

```python
from mazegen.fortune import build

graph = build([(10, 10), (60, 40), (30, 80)], 100, 100)
for cell in graph.cells:
    print(cell.site, len(cell.half_edges))
```

## What it does not do

There is no graphical window or live animation. The command prints only the
finished maze, and no interface lets you watch the maze grow or switch
generators while it runs. The Voronoi builder is a library only. No generator
or command uses it.

## Tests

```
pip install .[test]
pytest
```