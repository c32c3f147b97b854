import pytest

from adventpuzzles.y2024_day12 import parse_input, part01, part02

EXAMPLE_1 = """AAAA
BBCD
BBCC
EEEC"""

EXAMPLE_2 = """OOOOO
OXOXO
OOOOO
OXOXO
OOOOO"""

EXAMPLE_3 = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE"""


@pytest.mark.parametrize(
    "text, expected",
    [(EXAMPLE_1, 140), (EXAMPLE_2, 772), (EXAMPLE_3, 1930)],
)
def test_part01_examples(text, expected):
    assert part01(parse_input(text)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [(EXAMPLE_1, 80), (EXAMPLE_2, 436), (EXAMPLE_3, 1206)],
)
def test_part02_examples(text, expected):
    assert part02(parse_input(text)) == expected


def test_single_cell():
    grid = parse_input("A")
    assert part01(grid) == 4
    assert part02(grid) == 4