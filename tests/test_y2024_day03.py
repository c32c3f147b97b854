from adventpuzzles.y2024_day03 import part01, part02


def test_part01_example():
    memory = b"xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
    assert part01(memory) == 161


def test_part02_example():
    memory = b"xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
    assert part02(memory) == 48


def test_part01_accepts_text():
    assert part01("mul(3,4)") == 12


def test_part01_rejects_long_numbers():
    assert part01("mul(1234,5)") == 0


def test_part02_disabled_to_end():
    assert part02("mul(2,3)don't()mul(4,5)") == 6