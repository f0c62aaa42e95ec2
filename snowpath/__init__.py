"""Map validation, XPM sprite decoding, pixel images and scene layout for a snowy tile game."""

__version__ = "0.1.0"
__all__ = ["colors", "colorconv", "image", "xpm", "gamemap", "render"]