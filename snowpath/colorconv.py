"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of the lowest run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Describe three channel masks as (shift, bits) pairs for red, green, blue."""
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return (*red, *green, *blue)


def convert_color(color: int, depth: int, shifts: Shifts) -> int:
    """Turn a 0xRRGGBB colour into the pixel value for a visual of ``depth`` bits.

    Visuals of 24 bits or more take the colour as it is; shallower ones
    get each channel scaled down to its mask width and shifted into place.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )