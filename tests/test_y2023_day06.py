import pytest

from adventpuzzles.y2023_day06 import held, main, nwin, parse_race_doc, part01, part02

EXAMPLE = """Time:      7  15   30
Distance:  9  40  200"""


def test_parse_race_doc():
    assert parse_race_doc(EXAMPLE) == ([7, 15, 30], [9, 40, 200])


def test_part01_example():
    assert part01(*parse_race_doc(EXAMPLE)) == 288


def test_part02_example():
    assert part02(*parse_race_doc(EXAMPLE)) == 71503


@pytest.mark.parametrize(
    ("time", "distance", "expected"),
    [(7, 9, 4), (15, 40, 8), (30, 200, 9)],
)
def test_nwin(time, distance, expected):
    assert nwin(time, distance) == expected


def test_held_exact_roots():
    assert held(30, 200) == (10.0, 20.0)


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        part01([7, 15], [9])


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE + "\n")
    main([str(path)])
    assert capsys.readouterr().out.split() == ["288", "71503"]