"""In-memory pixel image with a fixed depth and byte order."""

from __future__ import annotations


class Image:
    """A zero-filled pixel buffer whose rows are padded to 32 bits."""

    def __init__(self, width: int, height: int, bits_per_pixel: int, big_endian: bool) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.bytes_per_pixel = bits_per_pixel // 8
        self.big_endian = bool(big_endian)
        self.size_line = (width * bits_per_pixel + 31) // 32 * 4
        self.data = bytearray(self.size_line * height)

    @property
    def endian(self) -> int:
        """1 for big-endian pixel storage, 0 for little-endian."""
        return int(self.big_endian)

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color``, keeping as many low bytes as a pixel holds."""
        start = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << (8 * size)) - 1)
        self.data[start:start + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the stored value of one pixel."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._byteorder)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``, padding included."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        return bytes(self.data[y * self.size_line:(y + 1) * self.size_line])