import pytest

from adventpuzzles.y2024_day11 import count, parse_input, part01, part02


def test_part01_example():
    assert part01(parse_input("125 17")) == 55312


def test_part02_example():
    assert part02(parse_input("125 17")) == 65601038650482


def test_parse_input():
    assert parse_input("0 1 10 99 999\n") == [0, 1, 10, 99, 999]


def test_parse_input_rejects_garbage():
    with pytest.raises(ValueError):
        parse_input("12 x")


@pytest.mark.parametrize(
    "stone, steps, expected",
    [(5, 0, 1), (0, 1, 1), (125, 1, 1), (17, 1, 2), (1000, 1, 2)],
)
def test_count_single_blinks(stone, steps, expected):
    assert count(stone, steps) == expected