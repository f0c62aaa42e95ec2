"""Reading of XPM pixmaps into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from snowpath.colors import lookup_color
from snowpath.image import Image

TRANSPARENT = 0xFF000000
_NAME_LIMIT = 63

_INT_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")
_HEX_RE = re.compile(r"[ \t\n\r\f\v]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_WORD_SEP = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEP.split(text) if word]


def _blank_blocks(text: str, opener: str, closer: str) -> str:
    pieces: list[str] = []
    quoted = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            quoted = not quoted
        elif not quoted and text.startswith(opener, i):
            end = text.find(closer, i + len(opener))
            stop = len(text) if end == -1 else end + len(closer)
            pieces.append(" " * (stop - i))
            i = stop
            continue
        pieces.append(ch)
        i += 1
    return "".join(pieces)


def strip_comments(text: str) -> str:
    """Blank out /* */ and // comments outside quotes, keeping the length."""
    return _blank_blocks(_blank_blocks(text, "/*", "*/"), "//", "\n")


def quoted_lines(text: str) -> list[str]:
    """Return the contents of each complete pair of double quotes."""
    parts = text.split('"')
    pairs = (len(parts) - 1) // 2
    return parts[1:2 * pairs:2]


def _atoi(word: str) -> int:
    match = _INT_RE.match(word)
    return int(match.group(1)) if match else 0


def _parse_hex(digits: str) -> int:
    match = _HEX_RE.match(digits)
    sign, number = match.group(1), match.group(2)
    value = int(number, 16) if number else 0
    if sign == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, end: str | None) -> int:
    """Resolve an XPM colour spec to 0xRRGGBB; -1 means none, unknown gives 0.

    ``end`` is the word after the colour, tried as the second half of a
    two-word colour name.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    color = lookup_color(name)
    return 0 if color is None else color


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def parse_xpm(lines: Iterable[str]) -> tuple[int, int, list[list[int]]]:
    """Parse quoted XPM lines into (width, height, rows of colours).

    Transparent pixels come out as 0xFF000000.
    """
    it = iter(lines)
    words = split_words(_next_line(it, "the header"))
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {' '.join(words[:4])}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(it, "the end of the colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour definition without a colour: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows: list[list[int]] = []
    for _ in range(height):
        line = _next_line(it, "the last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = [palette.get(line[x * cpp:(x + 1) * cpp], 0) for x in range(width)]
        rows.append([TRANSPARENT if color == -1 else color for color in row])
    return width, height, rows


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build a 32-bit little-endian image from quoted XPM lines."""
    width, height, rows = parse_xpm(lines)
    image = Image(width, height, 32, False)
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.set_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    with open(path, "rb") as handle:
        text = handle.read().decode("latin-1")
    return xpm_to_image(quoted_lines(strip_comments(text)))