[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventpuzzles"
version = "0.1.0"
description = "Solutions to daily programming puzzles from 2019, 2023 and 2024, with an Intcode computer and grid helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "intcode", "grid", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2019-01 = "adventpuzzles.y2019_day01:main"
aoc-2019-02 = "adventpuzzles.y2019_day02:main"
aoc-2023-01 = "adventpuzzles.y2023_day01:main"
aoc-2023-02 = "adventpuzzles.y2023_day02:main"
aoc-2023-03 = "adventpuzzles.y2023_day03:main"
aoc-2023-04 = "adventpuzzles.y2023_day04:main"
aoc-2023-05 = "adventpuzzles.y2023_day05:main"
aoc-2023-06 = "adventpuzzles.y2023_day06:main"
aoc-2023-07 = "adventpuzzles.y2023_day07:main"
aoc-2023-08 = "adventpuzzles.y2023_day08:main"
aoc-2023-09 = "adventpuzzles.y2023_day09:main"
aoc-2023-10 = "adventpuzzles.y2023_day10:main"
aoc-2023-11 = "adventpuzzles.y2023_day11:main"
aoc-2023-12 = "adventpuzzles.y2023_day12:main"
aoc-2023-13 = "adventpuzzles.y2023_day13:main"
aoc-2023-14 = "adventpuzzles.y2023_day14:main"
aoc-2024-01 = "adventpuzzles.y2024_day01:main"
aoc-2024-02 = "adventpuzzles.y2024_day02:main"
aoc-2024-03 = "adventpuzzles.y2024_day03:main"
aoc-2024-04 = "adventpuzzles.y2024_day04:main"
aoc-2024-05 = "adventpuzzles.y2024_day05:main"
aoc-2024-06 = "adventpuzzles.y2024_day06:main"
aoc-2024-07 = "adventpuzzles.y2024_day07:main"
aoc-2024-08 = "adventpuzzles.y2024_day08:main"
aoc-2024-09 = "adventpuzzles.y2024_day09:main"
aoc-2024-10 = "adventpuzzles.y2024_day10:main"
aoc-2024-11 = "adventpuzzles.y2024_day11:main"
aoc-2024-12 = "adventpuzzles.y2024_day12:main"
aoc-2024-13 = "adventpuzzles.y2024_day13:main"

[tool.hatch.build.targets.wheel]
packages = ["adventpuzzles"]

[tool.hatch.build.targets.sdist]
include = ["adventpuzzles", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
