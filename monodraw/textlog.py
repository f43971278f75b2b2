"""A scrolling character screen that records text written to it."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ["TextLog"]

_SPACE = ord(" ")


class TextLog:
    """Character grid with a cursor, scrolling and redraw notifications.

    Control characters: ``\\n`` moves to the start of the next line,
    ``\\r`` to the start of the current line, ``\\t`` to the next multiple
    of 8 and ``\\f`` clears the screen. Everything else is stored as a byte.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self.width = width
        self.height = height
        self.screen = bytearray(b" " * (width * height))
        self.cursor_x = 0
        self.cursor_y = 0
        self.redraw_line_for_each_char = False
        self.line_height_offset = 0
        self.is_redraw_line = False
        self.is_redraw_all = False
        self.redraw_line = 0
        self._redraw_all_on_next_newline = False
        self._callback: Callable[[TextLog], None] | None = None

    def set_callback(self, callback: Callable[[TextLog], None] | None) -> None:
        """Install the function called with this log when a redraw is due."""
        self._callback = callback

    def _clear_screen(self) -> None:
        self.screen[:] = b" " * (self.width * self.height)

    def _scroll_up(self) -> None:
        del self.screen[: self.width]
        self.screen.extend(b" " * self.width)
        if self.redraw_line_for_each_char:
            self.is_redraw_all = True
        else:
            self._redraw_all_on_next_newline = True

    def _cursor_on_screen(self) -> None:
        if self.cursor_x >= self.width:
            self.cursor_x = 0
            self.cursor_y += 1
        while self.cursor_y >= self.height:
            self._scroll_up()
            self.cursor_y -= 1

    def _put(self, code: int) -> None:
        self._cursor_on_screen()
        self.screen[self.cursor_y * self.width + self.cursor_x] = code
        self.cursor_x += 1
        if self.redraw_line_for_each_char:
            self.is_redraw_line = True
            self.redraw_line = self.cursor_y

    def _handle(self, code: int) -> None:
        if code == 0x0A:
            self.is_redraw_line = True
            self.redraw_line = self.cursor_y
            if self._redraw_all_on_next_newline:
                self.is_redraw_all = True
            self._redraw_all_on_next_newline = False
            self.cursor_y += 1
            self.cursor_x = 0
        elif code == 0x0D:
            self.is_redraw_line = True
            self.redraw_line = self.cursor_y
            self.cursor_x = 0
        elif code == 0x09:
            self.cursor_x = (self.cursor_x + 8) & 0xF8
        elif code == 0x0C:
            self._clear_screen()
            self.is_redraw_all = True
            self.cursor_x = 0
            self.cursor_y = 0
        else:
            self._put(code)

    @staticmethod
    def _code(c: int | str) -> int:
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError("expected a single character")
            c = ord(c)
        if not 0 <= c <= 0xFF:
            raise ValueError("character code must fit in one byte")
        return c

    def write_char(self, c: int | str) -> None:
        """Write one character and notify the callback if a redraw is due."""
        self._handle(self._code(c))
        if self.is_redraw_line or self.is_redraw_all:
            if self._callback is not None:
                self._callback(self)
            self.is_redraw_line = False
            self.is_redraw_all = False

    def write(self, s: str | bytes) -> None:
        """Write a string (encoded as UTF-8) or raw bytes."""
        data = s.encode("utf-8") if isinstance(s, str) else s
        for code in data:
            self.write_char(code)

    def write_hex8(self, value: int) -> None:
        """Write a byte as two lower-case hex digits."""
        self.write(format(value & 0xFF, "02x"))

    def write_hex16(self, value: int) -> None:
        """Write a 16-bit value as four hex digits."""
        self.write_hex8(value >> 8)
        self.write_hex8(value)

    def write_hex32(self, value: int) -> None:
        """Write a 32-bit value as eight hex digits."""
        self.write_hex16(value >> 16)
        self.write_hex16(value)

    def write_dec8(self, value: int, digits: int) -> None:
        """Write the last ``digits`` (1..3) decimal digits of a byte, zero padded."""
        if not 1 <= digits <= 3:
            raise ValueError("digits must be between 1 and 3")
        self.write(format(value & 0xFF, "03d")[-digits:])

    def write_dec16(self, value: int, digits: int) -> None:
        """Write the last ``digits`` (1..5) decimal digits of a 16-bit value."""
        if not 1 <= digits <= 5:
            raise ValueError("digits must be between 1 and 5")
        self.write(format(value & 0xFFFF, "05d")[-digits:])

    def lines(self) -> list[str]:
        """Return the screen content, one string per row."""
        return [
            self.screen[row * self.width : (row + 1) * self.width].decode("latin-1")
            for row in range(self.height)
        ]