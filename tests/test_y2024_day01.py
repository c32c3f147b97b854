import pytest

from adventpuzzles.y2024_day01 import parse_lists, part01, part02

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3"""


def test_parse_lists():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_part01_example():
    assert part01(*parse_lists(EXAMPLE)) == 11


def test_part02_example():
    assert part02(*parse_lists(EXAMPLE)) == 31


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_lists("3   x")


def test_part02_absent_numbers_score_zero():
    assert part02([5, 6], [1, 2]) == 0