[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shortpaths"
version = "0.1.0"
description = "Single-source, point-to-point and all-pairs shortest path algorithms with sequential and threaded variants"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "shortest-path",
    "dijkstra",
    "bidirectional-dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "johnson",
    "delta-stepping",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shortpaths = "shortpaths.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shortpaths"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
