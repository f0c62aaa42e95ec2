"""Layout of a map as a list of sprite drawings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from snowpath.gamemap import GameMap

TILE_SIZE = 80
IMAGE_DIR = "./images"
TEXT_COLOR = 0xFFFFFF
MOVES_LABEL = "movement :"
LABEL_POSITION = (160, 30)
MOVES_POSITION = (240, 30)


class Sprite(Enum):
    """Every image the game draws, valued by its file name."""

    WALL = "wall.xpm"
    TREES = "trees.xpm"
    BACKGROUND = "snowBG.xpm"
    PRESENT = "present.xpm"
    EXIT = "exit.xpm"
    EXIT_1 = "exit_1.xpm"
    EXIT_2 = "exit_2.xpm"
    SANTA_TOP = "santa_T.xpm"
    SANTA_TOP_LEFT = "santa_T_L.xpm"
    DEAD_RIGHT = "deadR.xpm"
    DEAD_LEFT = "deadL.xpm"
    SANTA_R0 = "santaR0.xpm"
    SANTA_R1 = "santaR1.xpm"
    SANTA_R3 = "santaR3.xpm"
    SANTA_L0 = "santaL0.xpm"
    SANTA_L1 = "santaL1.xpm"
    SANTA_L3 = "santaL3.xpm"
    SANTA_PRESENT_R = "santa_present_R.xpm"
    SANTA_PRESENT_L = "santa_present_L.xpm"
    FIGHT_R = "fight_R.xpm"
    FIGHT_L = "fight_L.xpm"
    FIGHT_T = "fight_T.xpm"
    FIGHT_B = "fight_b.xpm"
    ENEMY = "ennemy.xpm"


EXIT_FRAMES = (Sprite.EXIT, Sprite.EXIT_1, Sprite.EXIT_2)
PLAYER_FRAMES = (
    (Sprite.SANTA_R0, Sprite.SANTA_R1, Sprite.SANTA_R3, Sprite.SANTA_R1),
    (Sprite.SANTA_L0, Sprite.SANTA_L1, Sprite.SANTA_L3, Sprite.SANTA_L1),
)
PRESENT_FRAMES = (
    (Sprite.SANTA_PRESENT_R, Sprite.SANTA_PRESENT_L),
    (Sprite.SANTA_PRESENT_L, Sprite.SANTA_PRESENT_R),
)
FIGHT_FRAMES = (Sprite.FIGHT_R, Sprite.FIGHT_L, Sprite.FIGHT_T, Sprite.FIGHT_B)
DEAD_FRAMES = (Sprite.DEAD_RIGHT, Sprite.DEAD_LEFT)


@dataclass(frozen=True)
class DrawCommand:
    """One sprite placed at pixel position (x, y)."""

    sprite: Sprite
    x: int
    y: int


@dataclass(frozen=True)
class Scene:
    """Everything drawn for one frame of the map."""

    width: int
    height: int
    draws: tuple[DrawCommand, ...]
    texts: tuple[tuple[int, int, int, str], ...]
    exit_position: tuple[int, int] | None
    enemies: tuple[tuple[int, int], ...]


def sprite_path(sprite: Sprite) -> str:
    """Return the file path the sprite is loaded from."""
    return f"{IMAGE_DIR}/{sprite.value}"


def tile_sprite(game_map: GameMap, row: int, col: int) -> Sprite | None:
    """Return the sprite for one map cell, or None for an unknown tile."""
    line = game_map.rows[row]
    tile = line[col]
    if tile == "0":
        return Sprite.BACKGROUND
    if tile == "1":
        on_border = row in (0, game_map.height - 1) or col in (0, len(line) - 1)
        return Sprite.WALL if on_border else Sprite.TREES
    return {
        "C": Sprite.PRESENT,
        "P": PLAYER_FRAMES[0][0],
        "E": EXIT_FRAMES[0],
        "M": Sprite.ENEMY,
    }.get(tile)


def build_scene(game_map: GameMap, moves: int | str) -> Scene:
    """Lay out every tile of the map and the move counter."""
    draws: list[DrawCommand] = []
    exit_position: tuple[int, int] | None = None
    scanned_enemies: list[tuple[int, int]] = []
    for row, line in enumerate(game_map.rows):
        for col, tile in enumerate(line):
            x, y = col * TILE_SIZE, row * TILE_SIZE
            sprite = tile_sprite(game_map, row, col)
            if sprite is not None:
                draws.append(DrawCommand(sprite, x, y))
            if tile == "E":
                exit_position = (x, y)
            elif tile == "M":
                scanned_enemies.append((col, row))
    texts = (
        (*LABEL_POSITION, TEXT_COLOR, MOVES_LABEL),
        (*MOVES_POSITION, TEXT_COLOR, str(moves)),
    )
    return Scene(
        width=game_map.width * TILE_SIZE,
        height=game_map.height * TILE_SIZE,
        draws=tuple(draws),
        texts=texts,
        exit_position=exit_position,
        # The last enemy slot is filled by the first enemy met in reading order.
        enemies=tuple(reversed(scanned_enemies)),
    )