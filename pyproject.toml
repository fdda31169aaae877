[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seagraph"
version = "0.1.0"
description = "Space-efficient graph algorithms and succinct data structures: bitsets, rank/select, choice dictionaries, compact arrays, BFS and DFS."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "dfs",
    "bfs",
    "rank-select",
    "succinct",
    "bitset",
    "choice-dictionary",
    "dyck-words",
    "space-efficient",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seagraph"]

[tool.hatch.build.targets.sdist]
include = ["seagraph", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
