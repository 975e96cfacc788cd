"""Step-by-step maze generation, a text renderer, and a Voronoi diagram builder."""

__version__ = "0.1.0"
__all__ = ["cli", "fortune", "generators", "graph", "rbtree", "simulation", "world"]