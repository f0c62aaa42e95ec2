import pytest

from snowpath.colors import lookup_color
from snowpath.xpm import (
    XpmError,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    text_to_rgb,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
". c #FF0000",
"# c None",
// pixels follow
".#",
"#.",
};
"""


def test_split_words():
    assert split_words("  1  2\t3 ") == ["1", "2", "3"]
    assert split_words("") == []


def test_strip_comments_keeps_length_and_quotes():
    text = '"a/*b*/" /* c */'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result == '"a/*b*/"' + " " * 8


def test_strip_line_comment():
    text = '"x" // note\n"y"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert quoted_lines(result) == ["x", "y"]
    assert "note" not in result


def test_quoted_lines_ignores_unclosed():
    assert quoted_lines('x "ab" y "cd" "e') == ["ab", "cd"]


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00", None) == 0x00FF00


def test_text_to_rgb_names():
    assert text_to_rgb("light", "blue") == lookup_color("light blue")
    assert text_to_rgb("Red", None) == lookup_color("red")
    assert text_to_rgb("None", None) == -1
    assert text_to_rgb("nosuchcolour", None) == 0


def test_file_to_image(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE)
    img = xpm_file_to_image(path)
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == 0xFF0000
    assert img.get_pixel(1, 0) == 0xFF000000
    assert img.get_pixel(0, 1) == 0xFF000000
    assert img.get_pixel(1, 1) == 0xFF0000


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")


def test_parse_rows():
    width, height, rows = parse_xpm(["3 1 2 1", "a c #010203", "b c #040506", "abb"])
    assert (width, height) == (3, 1)
    assert rows == [[0x010203, 0x040506, 0x040506]]


def test_two_chars_per_pixel_last_definition_wins():
    _, _, rows = parse_xpm(["1 1 2 2", "aa c #000001", "aa c #000002", "aa"])
    assert rows == [[0x000002]]


def test_three_chars_per_pixel_first_definition_wins():
    _, _, rows = parse_xpm(["1 1 2 3", "aaa c #000001", "aaa c #000002", "aaa"])
    assert rows == [[0x000001]]


def test_unknown_pixel_key_is_zero():
    _, _, rows = parse_xpm(["2 1 1 1", "a c #0000FF", "az"])
    assert rows == [[0x0000FF, 0]]


def test_xpm_to_image_round_trip():
    img = xpm_to_image(["2 1 2 1", "a c #123456", "b c #654321", "ba"])
    assert img.get_pixel(0, 0) == 0x654321
    assert img.get_pixel(1, 0) == 0x123456


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 2 1 1", "a c #000000", "aa", "aa"],
        ["1 1 1 1", "a s #000000", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["3 1 1 1", "a c #000000", "aa"],
    ],
)
def test_bad_data(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)