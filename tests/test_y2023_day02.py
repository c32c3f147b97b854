from adventpuzzles.y2023_day02 import (
    CubeSet,
    Game,
    main,
    parse_cubeset,
    parse_game,
    part01,
    part02,
    possible,
)

EXAMPLE = """Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"""


def test_part01_example():
    assert part01(EXAMPLE.split("\n")) == 8


def test_part02_example():
    assert part02(EXAMPLE.split("\n")) == 2286


def test_parse_game():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game == Game(
        1, [CubeSet(red=4, blue=3), CubeSet(red=1, green=2, blue=6), CubeSet(green=2)]
    )


def test_minimum_and_power():
    game = parse_game("Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green")
    assert game.minimum() == CubeSet(red=4, green=2, blue=6)
    assert game.minimum().power() == 48


def test_parse_cubeset_ignores_unknown_colour():
    assert parse_cubeset("5 purple, 2 red") == CubeSet(red=2)


def test_possible():
    game = parse_game("Game 3: 8 green, 6 blue, 20 red")
    assert not possible(game, CubeSet(12, 13, 14))
    assert possible(game, game.minimum())


def test_main(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE + "\n", encoding="utf-8")
    main([str(path)])
    assert capsys.readouterr().out == "8\n2286\n"