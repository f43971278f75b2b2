"""Monochrome tile buffers in the two byte layouts used by display controllers."""

from __future__ import annotations

from enum import Enum

__all__ = ["BufferLayout", "TileBuffer"]


class BufferLayout(Enum):
    """How the pixels of a buffer are packed into bytes."""

    #: Each byte is a vertical strip of 8 pixels, least significant bit on top.
    VERTICAL_TOP_LSB = "vertical_top_lsb"
    #: Each byte is a horizontal strip of 8 pixels, most significant bit on the left.
    HORIZONTAL_RIGHT_LSB = "horizontal_right_lsb"


class TileBuffer:
    """A pixel buffer ``tile_width`` tiles wide and ``tile_rows`` tiles high.

    A tile is 8x8 pixels, so the buffer holds ``tile_width * tile_rows * 8``
    bytes. Drawing colors: 0 clears, 1 sets and 2 inverts pixels.
    """

    def __init__(
        self,
        tile_width: int,
        tile_rows: int,
        layout: BufferLayout = BufferLayout.VERTICAL_TOP_LSB,
    ) -> None:
        if tile_width <= 0 or tile_rows <= 0:
            raise ValueError("tile_width and tile_rows must be positive")
        self.tile_width = tile_width
        self.tile_rows = tile_rows
        self.layout = BufferLayout(layout)
        self.data = bytearray(tile_width * tile_rows * 8)

    @property
    def pixel_width(self) -> int:
        """Width of the buffer in pixels."""
        return self.tile_width * 8

    @property
    def pixel_height(self) -> int:
        """Height of the buffer in pixels."""
        return self.tile_rows * 8

    def clear(self) -> None:
        """Set every pixel to 0."""
        self.data[:] = bytes(len(self.data))

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        if not (0 <= x < self.pixel_width and 0 <= y < self.pixel_height):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        if self.layout is BufferLayout.VERTICAL_TOP_LSB:
            offset = (y & ~7) * self.tile_width + x
            mask = 1 << (y & 7)
        else:
            offset = y * self.tile_width + (x >> 3)
            mask = 0x80 >> (x & 7)
        return offset, mask

    def _apply(self, x: int, y: int, color: int) -> None:
        offset, mask = self._locate(x, y)
        if color <= 1:
            self.data[offset] |= mask
        if color != 1:
            self.data[offset] ^= mask

    def hvline(self, x: int, y: int, length: int, direction: int, color: int) -> None:
        """Draw a line of ``length`` pixels from ``(x, y)`` in buffer coordinates.

        ``direction`` 0 draws to the right, 1 draws downwards. The whole line
        must lie inside the buffer.
        """
        if length <= 0:
            raise ValueError("length must be positive")
        if direction not in (0, 1):
            raise ValueError("direction must be 0 or 1")
        if direction == 0:
            self._locate(x, y)
            self._locate(x + length - 1, y)
            points = ((px, y) for px in range(x, x + length))
        else:
            self._locate(x, y)
            self._locate(x, y + length - 1)
            points = ((x, py) for py in range(y, y + length))
        for px, py in points:
            self._apply(px, py, color)

    def get_pixel(self, x: int, y: int) -> bool:
        """Return True if the pixel at ``(x, y)`` is set."""
        offset, mask = self._locate(x, y)
        return bool(self.data[offset] & mask)