[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2021"
version = "0.1.0"
description = "Solutions to the 2021 Advent of Code puzzles, runnable from the command line"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc2021"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2021 = "advent2021.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2021"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
