import pytest

from snowpath.gamemap import validate
from snowpath.render import (
    TILE_SIZE,
    DrawCommand,
    Sprite,
    build_scene,
    sprite_path,
    tile_sprite,
)

ROWS = ["1111111", "1P0M0C1", "10M1E01", "1111111"]


@pytest.fixture
def game_map():
    return validate(ROWS)


def test_sprite_paths_from_source():
    assert sprite_path(Sprite.WALL) == "./images/wall.xpm"
    assert sprite_path(Sprite.ENEMY) == "./images/ennemy.xpm"
    assert sprite_path(Sprite.FIGHT_B) == "./images/fight_b.xpm"
    assert sprite_path(Sprite.BACKGROUND) == "./images/snowBG.xpm"


def test_all_sprite_paths_are_distinct_xpm_files():
    paths = [sprite_path(sprite) for sprite in Sprite]
    assert len(set(paths)) == len(paths)
    assert all(p.startswith("./images/") and p.endswith(".xpm") for p in paths)


def test_tile_sprite_walls(game_map):
    assert tile_sprite(game_map, 0, 0) is Sprite.WALL
    assert tile_sprite(game_map, 1, 0) is Sprite.WALL
    assert tile_sprite(game_map, 2, 3) is Sprite.TREES


def test_tile_sprite_items(game_map):
    assert tile_sprite(game_map, 1, 1) is Sprite.SANTA_R0
    assert tile_sprite(game_map, 1, 2) is Sprite.BACKGROUND
    assert tile_sprite(game_map, 1, 3) is Sprite.ENEMY
    assert tile_sprite(game_map, 1, 5) is Sprite.PRESENT
    assert tile_sprite(game_map, 2, 4) is Sprite.EXIT


def test_scene_draws_every_cell_once(game_map):
    scene = build_scene(game_map, 0)
    cells = {(d.x // TILE_SIZE, d.y // TILE_SIZE) for d in scene.draws}
    assert len(scene.draws) == len(cells)
    expected = {(x, y) for y, row in enumerate(ROWS) for x in range(len(row))}
    assert cells == expected
    assert all(d.x % TILE_SIZE == 0 and d.y % TILE_SIZE == 0 for d in scene.draws)


def test_scene_order_and_size(game_map):
    scene = build_scene(game_map, 0)
    assert scene.draws[0] == DrawCommand(Sprite.WALL, 0, 0)
    assert scene.width == len(ROWS[0]) * TILE_SIZE
    assert scene.height == len(ROWS) * TILE_SIZE


def test_scene_texts(game_map):
    scene = build_scene(game_map, 5)
    assert scene.texts == (
        (160, 30, 0xFFFFFF, "movement :"),
        (240, 30, 0xFFFFFF, "5"),
    )


def test_scene_exit_position(game_map):
    scene = build_scene(game_map, 0)
    assert scene.exit_position == (4 * TILE_SIZE, 2 * TILE_SIZE)


def test_scene_enemies_in_reverse_reading_order(game_map):
    scene = build_scene(game_map, 0)
    assert scene.enemies == ((2, 2), (3, 1))
    for x, y in scene.enemies:
        assert ROWS[y][x] == "M"


def test_scene_without_enemies():
    scene = build_scene(validate(["11111", "1PCE1", "11111"]), "12")
    assert scene.enemies == ()
    assert scene.texts[1][3] == "12"