import pytest

from snowpath.colorconv import convert_color, rgb_shifts


def test_shifts_for_888_visual():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_shifts_for_565_visual():
    assert rgb_shifts(0xF800, 0x7E0, 0x1F) == (11, 5, 5, 6, 0, 5)


def test_deep_visual_keeps_colour():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0x123456, 24, shifts) == 0x123456
    assert convert_color(0xABCDEF, 32, shifts) == 0xABCDEF


@pytest.mark.parametrize("color", [0x000000, 0xFFFFFF, 0x123456, 0xFF00FF, 0x00FF00])
def test_888_layout_at_low_depth_is_identity(color):
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    assert convert_color(color, 16, shifts) == color


def test_white_fills_565_pixel():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0xFFFFFF, 16, shifts) == 0xF800 | 0x7E0 | 0x1F


def test_black_is_zero():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0x000000, 16, shifts) == 0


def test_pure_red_stays_in_red_mask():
    shifts = rgb_shifts(0xF800, 0x7E0, 0x1F)
    assert convert_color(0xFF0000, 16, shifts) == 0xF800


def test_zero_mask_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)