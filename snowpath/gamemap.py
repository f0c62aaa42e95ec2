"""Loading and validation of .ber game maps."""

from __future__ import annotations

import sys
from collections import Counter, deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike, fspath

MAP_SUFFIX = ".ber"
WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "M"

_BORDER_TILES = WALL
_INNER_TILES = "01CEPM"


class MapError(ValueError):
    """Raised when a map file is missing, badly named or not playable."""


@dataclass(frozen=True)
class GameMap:
    """A validated grid of map tiles, one string per row."""

    rows: tuple[str, ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def collectibles(self) -> int:
        return sum(row.count(COLLECTIBLE) for row in self.rows)

    def _positions(self, tile: str) -> list[tuple[int, int]]:
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, ch in enumerate(row)
            if ch == tile
        ]

    def player_position(self) -> tuple[int, int]:
        """Return (x, y) of the first player tile in reading order."""
        found = self._positions(PLAYER)
        if not found:
            raise MapError("map has no player")
        return found[0]

    def reachable(self) -> frozenset[tuple[int, int]]:
        """Return every (x, y) cell the player can walk to; walls block."""
        start = self.player_position()
        seen = {start}
        queue = deque([start])
        while queue:
            x, y = queue.popleft()
            for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
                if (nx, ny) in seen or not 0 <= ny < self.height:
                    continue
                row = self.rows[ny]
                if not 0 <= nx < len(row) or row[nx] == WALL:
                    continue
                seen.add((nx, ny))
                queue.append((nx, ny))
        return frozenset(seen)


def check_name(path: str | PathLike[str]) -> str | PathLike[str]:
    """Return ``path`` if its name ends with the .ber suffix, else raise."""
    name = fspath(path)
    dot = name.rfind(".")
    if dot == -1 or name[dot:] != MAP_SUFFIX:
        raise MapError("map's name must end with .ber")
    return path


def read_rows(path: str | PathLike[str]) -> list[str]:
    """Read the map file's lines without their line endings."""
    try:
        with open(path, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise MapError(f"cannot read map: {exc.strerror or exc}") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def validate(rows: Iterable[str]) -> GameMap:
    """Check that ``rows`` form a playable map and return it."""
    grid = tuple(rows)
    if not grid:
        raise MapError("map's empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise MapError("map's must be rectangular")

    counts: Counter[str] = Counter()
    last_row = len(grid) - 1
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            counts[ch] += 1
            if counts[EXIT] > 1 or counts[PLAYER] > 1:
                raise MapError("must have only 1 E and 1 P")
            on_border = y in (0, last_row) or x in (0, width - 1)
            if on_border and ch not in _BORDER_TILES:
                raise MapError("must be 1 (wall)")
            if not on_border and ch not in _INNER_TILES:
                raise MapError("map must be 0, 1, C, E, P or M")
    if counts[COLLECTIBLE] < 1 or counts[EXIT] < 1 or counts[PLAYER] < 1:
        raise MapError("must have 1 E, 1 P and least 1 C")

    game_map = GameMap(grid)
    reached = game_map.reachable()
    exits_reached = sum(1 for x, y in reached if grid[y][x] == EXIT)
    presents_reached = sum(1 for x, y in reached if grid[y][x] == COLLECTIBLE)
    if exits_reached != counts[EXIT] or presents_reached != counts[COLLECTIBLE]:
        raise MapError("invalid map")
    return game_map


def load_map(path: str | PathLike[str]) -> GameMap:
    """Check the file name, read the file and validate its map."""
    check_name(path)
    return validate(read_rows(path))


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the map named on the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("usage: snowpath MAP.ber", file=sys.stderr)
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(
        f"{args[0]}: {game_map.width}x{game_map.height} map, "
        f"{game_map.collectibles} presents"
    )
    return 0