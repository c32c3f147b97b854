import pytest

from adventpuzzles.inputs import parse_int, read_lines, read_numbers


def test_read_lines_strips_terminators(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"alpha\nbeta\r\ngamma\n")
    assert read_lines(path) == ["alpha", "beta", "gamma"]


def test_read_lines_without_final_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("one\n\ntwo", encoding="utf-8")
    assert read_lines(path) == ["one", "", "two"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("", encoding="utf-8")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.txt")


def test_read_numbers(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("12\n-7\n+3\n100756\n", encoding="utf-8")
    assert read_numbers(path) == [12, -7, 3, 100756]


def test_read_numbers_rejects_bad_line(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("12\nabc\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_numbers(path)


@pytest.mark.parametrize("text", ["42", "-42", "+42", "0", "007"])
def test_parse_int_round_trip(text):
    assert parse_int(text) == int(text)


@pytest.mark.parametrize("text", ["", " 1", "1 ", "1_000", "1.5", "-", "x1", "\u0663"])
def test_parse_int_rejects(text):
    with pytest.raises(ValueError):
        parse_int(text)