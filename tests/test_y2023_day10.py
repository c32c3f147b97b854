import pytest

from adventpuzzles.grid import Direction, Point
from adventpuzzles.y2023_day10 import (
    connected,
    crossings,
    main_loop,
    parse_field,
    part01,
    part02,
)


def _field(compact):
    """Turn rows separated by '/' into newline-separated text."""
    return compact.replace("/", "\n")


SIMPLE = _field("...../.S-7./.|.|./.L-J./.....")

COMPLEX = _field("..F7./.FJ|./SJ.L7/|F--J/LJ...")

ENCLOSED_1 = _field(
    ".........../.S-------7./"
    ".|F-----7|./.||.....||./"
    ".||.....||./.|L-7.F-J|./"
    ".|..|.|..|./.L--J.L--J./"
    "..........."
)

ENCLOSED_2 = _field(
    "........../.S------7./"
    ".|F----7|./.||....||./"
    ".||....||./.|L-7F-J|./"
    ".|..||..|./.L--JL--J./"
    ".........."
)

ENCLOSED_3 = _field(
    ".F----7F7F7F7F-7..../.|F--7||||||||FJ..../"
    ".||.FJ||||||||L7..../FJL7L7LJLJ||LJ.L-7../"
    "L--J.L7...LJS7F-7L7./....F-J..F7FJ|L7L7L7/"
    "....L7.F7||L7|.L7L7|/.....|FJLJ|FJ|F7|.LJ/"
    "....FJL-7.||.||||.../....L---J.LJ.LJLJ..."
)

ENCLOSED_4 = _field(
    "FF7FSF7F7F7F7F7F---7/L|LJ||||||||||||F--J/"
    "FL-7LJLJ||||||LJL-77/F--JF--7||LJLJ7F7FJ-/"
    "L---JF-JLJ.||-FJLJJ7/|F|F-JF---7F7-L7L|7|/"
    "|FFJF7L7F-JF7|JL---7/7-L-JL7||F7|L7F-7F7|/"
    "L.L7LFJ|||||FJL7||LJ/L7JLJL-JLJLJL--JLJ.L"
)


@pytest.mark.parametrize("text, expected", [(SIMPLE, 4), (COMPLEX, 8)])
def test_part01_examples(text, expected):
    assert part01(parse_field(text)) == expected


@pytest.mark.parametrize(
    "text, expected",
    [(ENCLOSED_1, 4), (ENCLOSED_2, 4), (ENCLOSED_3, 8), (ENCLOSED_4, 10)],
)
def test_part02_examples(text, expected):
    assert part02(parse_field(text)) == expected


def test_part02_leaves_field_unchanged():
    field = parse_field(SIMPLE)
    part02(field)
    assert field.value(Point(1, 1)) == "S"


def test_main_loop_marks_loop_tiles():
    loop = main_loop(parse_field(SIMPLE))
    assert sum(sum(row) for row in loop) == 8
    assert loop.value(Point(2, 2)) is False
    assert loop.value(Point(3, 3)) is True


def test_main_loop_without_start_raises():
    with pytest.raises(ValueError):
        main_loop(parse_field("...\n.-."))


def test_crossings_from_inside_and_on_loop():
    field = parse_field(SIMPLE.replace("S", "F"))
    loop = main_loop(parse_field(SIMPLE))
    assert crossings(field, loop, Point(2, 2)) == 1
    assert crossings(field, loop, Point(1, 2)) == 0
    assert crossings(field, loop, Point(0, 2)) == 2


@pytest.mark.parametrize(
    "a, b, direction, expected",
    [
        ("S", "-", Direction.RIGHT, True),
        ("|", "-", Direction.UP, False),
        ("|", "7", Direction.UP, True),
        ("F", "J", Direction.DOWN, True),
        ("-", "L", Direction.LEFT, True),
        ("-", "7", Direction.LEFT, False),
        ("S", None, Direction.UP, False),
    ],
)
def test_connected(a, b, direction, expected):
    assert connected(a, b, direction) is expected