from adventpuzzles.grid import Point
from adventpuzzles.y2024_day08 import Antenna, parse_input, part01, part02

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_part01_example():
    assert part01(parse_input(EXAMPLE)) == 14


def test_part02_example():
    assert part02(parse_input(EXAMPLE)) == 34


def test_parse_dimensions_and_antennas():
    plot = parse_input(EXAMPLE)
    assert plot.dim == Point(12, 12)
    assert len(plot.antennas) == 7
    assert plot.antennas[0] == Antenna(Point(8, 1), "0")


def test_lone_antenna_counts_only_in_part02():
    plot = parse_input("...\n.a.\n...")
    assert part01(plot) == 0
    assert part02(plot) == 1