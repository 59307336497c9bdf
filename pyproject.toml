[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roadassign"
version = "0.1.0"
description = "Shortest-path search, traffic assignment building blocks and spatial data structures for road networks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "traffic assignment",
    "shortest path",
    "dijkstra",
    "road network",
    "kd-tree",
    "priority queue",
    "resource-constrained shortest path",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
roadassign-constraint-demo = "roadassign.constraint_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["roadassign"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
