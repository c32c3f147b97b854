from adventpuzzles.y2024_day09 import (
    EMPTY,
    compact,
    compact_without_fragmentation,
    parse_input,
    part01,
    part02,
)

EXAMPLE = "2333133121414131402"


def _render(blocks):
    return "".join("." if b == EMPTY else str(b) for b in blocks)


def test_part01_example():
    assert part01(parse_input(EXAMPLE)) == 1928


def test_part02_example():
    assert part02(parse_input(EXAMPLE)) == 2858


def test_parse_small_map():
    assert _render(parse_input("12345")) == "0..111....22222"


def test_parse_ignores_trailing_newline():
    assert parse_input("12345\n") == parse_input("12345")


def test_compact_small_map():
    blocks = parse_input("12345")
    compact(blocks)
    assert _render(blocks) == "022111222......"


def test_compact_example_layout():
    blocks = parse_input(EXAMPLE)
    compact(blocks)
    assert _render(blocks) == "0099811188827773336446555566.............."


def test_compact_whole_files_example_layout():
    blocks = parse_input(EXAMPLE)
    compact_without_fragmentation(blocks)
    assert _render(blocks) == "00992111777.44.333....5555.6666.....8888.."


def test_parts_do_not_modify_input():
    blocks = parse_input(EXAMPLE)
    before = list(blocks)
    part01(blocks)
    part02(blocks)
    assert blocks == before