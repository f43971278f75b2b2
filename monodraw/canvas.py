"""A monochrome drawing surface with rotation, clipping and page-wise rendering."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum

from .framebuffer import BufferLayout, TileBuffer
from .intersection import clip_intersection, is_intersection_decision_tree

__all__ = ["Rotation", "Canvas", "MAX_COORD"]

MAX_COORD = 0xFFFF


class Rotation(Enum):
    """How user coordinates are mapped onto the display."""

    R0 = "r0"
    R1 = "r1"
    R2 = "r2"
    R3 = "r3"
    MIRROR = "mirror"
    MIRROR_VERTICAL = "mirror_vertical"

    @property
    def swaps_axes(self) -> bool:
        """True if the user width is the display height and vice versa."""
        return self in (Rotation.R1, Rotation.R3)


class Canvas:
    """A display of ``width`` x ``height`` pixels drawn through a tile buffer.

    With ``page_rows`` left as ``None`` the buffer covers the whole display.
    Otherwise it holds ``page_rows`` tile rows, and :meth:`pages` renders the
    display one page at a time into :attr:`memory`, the full display image.

    Coordinates are user coordinates after rotation. Drawing colors: 0 clears,
    1 sets and 2 inverts pixels.
    """

    def __init__(
        self,
        width: int,
        height: int,
        page_rows: int | None = None,
        layout: BufferLayout = BufferLayout.VERTICAL_TOP_LSB,
        rotation: Rotation = Rotation.R0,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.pixel_width = width
        self.pixel_height = height
        self.tile_width = (width + 7) // 8
        self.tile_height = (height + 7) // 8
        if page_rows is None:
            page_rows = self.tile_height
        if page_rows <= 0:
            raise ValueError("page_rows must be positive")
        self.tile_buf_height = page_rows
        self.buffer = TileBuffer(self.tile_width, page_rows, layout)
        self.memory = TileBuffer(self.tile_width, self.tile_height, layout)

        self.tile_curr_row = 0
        self.draw_color = 1
        self.is_auto_page_clear = True
        self.rotation = Rotation(rotation)

        self.width = width
        self.height = height
        self.pixel_buf_width = 0
        self.pixel_buf_height = 0
        self.pixel_curr_row = 0
        self.buf_y0 = 0
        self.buf_y1 = 0
        self.user_x0 = 0
        self.user_x1 = 0
        self.user_y0 = 0
        self.user_y1 = 0
        self.clip_x0 = 0
        self.clip_y0 = 0
        self.clip_x1 = MAX_COORD
        self.clip_y1 = MAX_COORD
        self.is_page_clip_window_intersection = True

        self._update_dimension()
        self.set_max_clip_window()

    # ------------------------------------------------------------------
    # dimensions and windows

    def _update_dimension(self) -> None:
        self.pixel_buf_height = self.tile_buf_height * 8
        self.pixel_buf_width = self.tile_width * 8
        self.pixel_curr_row = self.tile_curr_row * 8
        rows = self.tile_buf_height
        if rows + self.tile_curr_row > self.tile_height:
            rows = self.tile_height - self.tile_curr_row
        self.buf_y0 = self.pixel_curr_row
        self.buf_y1 = self.buf_y0 + rows * 8
        if self.rotation.swaps_axes:
            self.width = self.pixel_height
            self.height = self.pixel_width
        else:
            self.width = self.pixel_width
            self.height = self.pixel_height

    def _update_page_win(self) -> None:
        rotation = self.rotation
        if rotation is Rotation.R1:
            self.user_x0, self.user_x1 = self.buf_y0, self.buf_y1
            self.user_y0, self.user_y1 = 0, self.height
        elif rotation is Rotation.R2:
            self.user_x0, self.user_x1 = 0, self.width
            self.user_y0 = self.height - self.buf_y1 if self.height >= self.buf_y1 else 0
            self.user_y1 = self.height - self.buf_y0
        elif rotation is Rotation.R3:
            self.user_x0 = self.width - self.buf_y1 if self.width >= self.buf_y1 else 0
            self.user_x1 = self.width - self.buf_y0
            self.user_y0, self.user_y1 = 0, self.height
        else:
            self.user_x0, self.user_x1 = 0, self.width
            self.user_y0, self.user_y1 = self.buf_y0, self.buf_y1
        self._apply_clip_window()

    def _apply_clip_window(self) -> None:
        if not self.is_intersection(self.clip_x0, self.clip_y0, self.clip_x1, self.clip_y1):
            self.is_page_clip_window_intersection = False
            return
        self.is_page_clip_window_intersection = True
        self.user_x0 = max(self.user_x0, self.clip_x0)
        self.user_x1 = min(self.user_x1, self.clip_x1)
        self.user_y0 = max(self.user_y0, self.clip_y0)
        self.user_y1 = min(self.user_y1, self.clip_y1)

    def _set_curr_tile_row(self, row: int) -> None:
        self.tile_curr_row = row
        self._update_dimension()
        self._update_page_win()

    def set_rotation(self, rotation: Rotation) -> None:
        """Change the display rotation."""
        self.rotation = Rotation(rotation)
        self._update_dimension()
        self._update_page_win()

    def set_clip_window(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Restrict drawing to ``[x0, x1) x [y0, y1)``."""
        self.clip_x0, self.clip_y0 = x0, y0
        self.clip_x1, self.clip_y1 = x1, y1
        self._update_page_win()

    def set_max_clip_window(self) -> None:
        """Remove any clip window restriction."""
        self.set_clip_window(0, 0, MAX_COORD, MAX_COORD)

    def is_intersection(self, x0: int, y0: int, x1: int, y1: int) -> bool:
        """True if the box ``[x0, x1) x [y0, y1)`` touches the current window."""
        if not is_intersection_decision_tree(self.user_y0, self.user_y1, y0, y1):
            return False
        return is_intersection_decision_tree(self.user_x0, self.user_x1, x0, x1)

    # ------------------------------------------------------------------
    # drawing

    def set_draw_color(self, color: int) -> None:
        """Select 0 (clear), 1 (set) or 2 (invert); larger values mean 1."""
        self.draw_color = 1 if color >= 3 else color

    def _transform(self, x: int, y: int, length: int, direction: int) -> tuple[int, int, int]:
        """Map a user line (direction 0 or 1) to display coordinates."""
        rotation = self.rotation
        if rotation is Rotation.R0:
            return x, y, direction
        if rotation is Rotation.MIRROR:
            xx = self.width - x - (length if direction & 1 == 0 else 1)
            return xx, y, direction
        if rotation is Rotation.MIRROR_VERTICAL:
            yy = self.height - y - (length if direction & 1 == 1 else 1)
            return x, yy, direction
        if rotation is Rotation.R1:
            xx = self.height - y - 1
            if direction == 0:
                return xx, x, 1
            return xx - length + 1, x, 0
        if rotation is Rotation.R2:
            if direction == 0:
                return self.width - x - length, self.height - y - 1, 0
            return self.width - x - 1, self.height - y - length, 1
        # R3
        if direction == 0:
            return y, self.width - x - length, 1
        return y, self.width - x - 1, 0

    def draw_hvline(self, x: int, y: int, length: int, direction: int) -> None:
        """Draw a clipped line; direction 0 right, 1 down, 2 left, 3 up."""
        if not self.is_page_clip_window_intersection or length <= 0:
            return
        if length > 1:
            if direction == 2:
                x -= length - 1
            elif direction == 3:
                y -= length - 1
        direction &= 1
        if direction == 0:
            if y < self.user_y0 or y >= self.user_y1:
                return
            clipped = clip_intersection(x, length, self.user_x0, self.user_x1)
            if clipped is None:
                return
            x, length = clipped
        else:
            if x < self.user_x0 or x >= self.user_x1:
                return
            clipped = clip_intersection(y, length, self.user_y0, self.user_y1)
            if clipped is None:
                return
            y, length = clipped
        if length <= 0:
            return
        hx, hy, hdir = self._transform(x, y, length, direction)
        self.buffer.hvline(hx, hy - self.pixel_curr_row, length, hdir, self.draw_color)

    def draw_hline(self, x: int, y: int, length: int) -> None:
        """Draw a horizontal line from ``(x, y)`` to the right."""
        self.draw_hvline(x, y, length, 0)

    def draw_vline(self, x: int, y: int, length: int) -> None:
        """Draw a vertical line from ``(x, y)`` downwards."""
        self.draw_hvline(x, y, length, 1)

    def draw_pixel(self, x: int, y: int) -> None:
        """Draw one pixel if it lies inside the current window."""
        if y < self.user_y0 or y >= self.user_y1:
            return
        if x < self.user_x0 or x >= self.user_x1:
            return
        self.draw_hvline(x, y, 1, 0)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Draw a straight line between two points, both included."""
        dx = abs(x1 - x2)
        dy = abs(y1 - y2)
        swapxy = dy > dx
        if swapxy:
            dx, dy = dy, dx
            x1, y1 = y1, x1
            x2, y2 = y2, x2
        if x1 > x2:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        err = dx >> 1
        ystep = 1 if y2 > y1 else -1
        y = y1
        for x in range(x1, x2 + 1):
            if swapxy:
                self.draw_pixel(y, x)
            else:
                self.draw_pixel(x, y)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    # ------------------------------------------------------------------
    # pages

    def _send_buffer(self) -> None:
        rows = min(self.tile_buf_height, self.tile_height - self.tile_curr_row)
        row_bytes = self.tile_width * 8
        start = self.tile_curr_row * row_bytes
        count = rows * row_bytes
        self.memory.data[start : start + count] = self.buffer.data[:count]

    def pages(self) -> Iterator[int]:
        """Render the display page by page.

        Yields the tile row of each page; the caller draws the whole picture
        for every page. After each page the buffer is copied into
        :attr:`memory`.
        """
        row = 0
        while row < self.tile_height:
            self._set_curr_tile_row(row)
            if self.is_auto_page_clear:
                self.buffer.clear()
            yield row
            self._send_buffer()
            row += self.tile_buf_height

    def clear_display(self) -> None:
        """Clear the buffer and the whole display, then return to tile row 0."""
        for _ in self.pages():
            pass
        self._set_curr_tile_row(0)

    def get_pixel(self, x: int, y: int) -> bool:
        """Return True if the pixel at user position ``(x, y)`` is set.

        With a full-size buffer this reads the buffer; in page mode it reads
        the display memory filled by :meth:`pages`.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the display")
        hx, hy, _ = self._transform(x, y, 1, 0)
        if self.tile_buf_height >= self.tile_height:
            return self.buffer.get_pixel(hx, hy)
        return self.memory.get_pixel(hx, hy)