import pytest

from snowpath.gamemap import (
    GameMap,
    MapError,
    check_name,
    load_map,
    main,
    read_rows,
    validate,
)

VALID = ["11111", "1PCE1", "11111"]

ENCLOSED_PRESENT = ["111111", "1P1C01", "1E1111", "111111"]
ENCLOSED_EXIT = ["111111", "1P1E01", "1C1111", "111111"]


def write_map(tmp_path, rows, name="level.ber", ending="\n"):
    path = tmp_path / name
    path.write_bytes(ending.join(rows).encode() + ending.encode())
    return path


@pytest.mark.parametrize("name", ["map.ber", "maps/level.ber", ".ber"])
def test_check_name_accepts_ber(name):
    assert check_name(name) == name


@pytest.mark.parametrize("name", ["map.txt", "map", "map.berx", "map.be", "dir.ber/map"])
def test_check_name_rejects_other_suffixes(name):
    with pytest.raises(MapError, match="must end with .ber"):
        check_name(name)


def test_read_rows_strips_line_endings(tmp_path):
    path = tmp_path / "a.ber"
    path.write_bytes(b"111\r\n1P1\n")
    assert read_rows(path) == ["111", "1P1"]


def test_read_rows_without_final_newline(tmp_path):
    path = tmp_path / "a.ber"
    path.write_bytes(b"a\n\nb")
    assert read_rows(path) == ["a", "", "b"]


def test_read_rows_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_rows(tmp_path / "absent.ber")


def test_validate_valid_map():
    game_map = validate(VALID)
    assert game_map.rows == tuple(VALID)
    assert game_map.collectibles == 1
    assert game_map.player_position() == (1, 1)
    assert (game_map.width, game_map.height) == (5, 3)


@pytest.mark.parametrize(
    "rows, message",
    [
        ([], "map's empty"),
        (["11111", "1PCE1", "1111"], "map's must be rectangular"),
        (["11111", "1PCE1", "11011"], "must be 1 \\(wall\\)"),
        (["11111", "1PXE1", "11111"], "map must be 0, 1, C, E, P or M"),
        (["111111", "1PPCE1", "111111"], "must have only 1 E and 1 P"),
        (["111111", "1PCEE1", "111111"], "must have only 1 E and 1 P"),
        (["11111", "1P0E1", "11111"], "must have 1 E, 1 P and least 1 C"),
        (ENCLOSED_PRESENT, "invalid map"),
        (ENCLOSED_EXIT, "invalid map"),
    ],
)
def test_validate_errors(rows, message):
    with pytest.raises(MapError, match=message):
        validate(rows)


def test_reachable_stops_at_walls():
    game_map = GameMap(tuple(ENCLOSED_PRESENT))
    assert game_map.reachable() == {(1, 1), (1, 2)}


def test_reachable_covers_open_map():
    game_map = validate(VALID)
    assert game_map.reachable() == {(1, 1), (2, 1), (3, 1)}


def test_monsters_do_not_block_paths():
    game_map = validate(["111111", "1PMCE1", "111111"])
    assert (4, 1) in game_map.reachable()


def test_player_position_without_player():
    with pytest.raises(MapError):
        GameMap(("111", "101", "111")).player_position()


def test_load_map_round_trip(tmp_path):
    path = write_map(tmp_path, VALID, ending="\r\n")
    assert load_map(path).rows == tuple(VALID)


def test_load_map_checks_name_first(tmp_path):
    path = write_map(tmp_path, VALID, name="level.txt")
    with pytest.raises(MapError, match="must end with .ber"):
        load_map(path)


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_bytes(b"")
    with pytest.raises(MapError, match="map's empty"):
        load_map(path)


def test_main_valid(tmp_path, capsys):
    path = write_map(tmp_path, VALID)
    assert main([str(path)]) == 0
    assert str(path) in capsys.readouterr().out


def test_main_invalid(tmp_path, capsys):
    path = write_map(tmp_path, ENCLOSED_PRESENT)
    assert main([str(path)]) == 1
    assert "invalid map" in capsys.readouterr().err


def test_main_needs_one_argument(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().err