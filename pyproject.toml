[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazegen"
version = "0.1.0"
description = "Step-by-step maze generation (Prim, recursive backtracker, hunt-and-kill) with a Voronoi diagram builder"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "maze-generation", "prim", "backtracker", "hunt-and-kill", "voronoi", "fortune"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazegen = "mazegen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazegen"]

[tool.pytest.ini_options]
addopts = "-ra"
