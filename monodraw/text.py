"""Text rendering with compressed bitmap fonts on a canvas."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum, IntEnum

from .canvas import Canvas
from .font import BitReader, Font
from .kerning import KerningTable, kerning_by_table

__all__ = ["HeightMode", "VerticalPosition", "TextRenderer", "NO_PREVIOUS"]

#: Encoding used as "previous glyph" before the first glyph of a string.
NO_PREVIOUS = 0xFFFF


class HeightMode(IntEnum):
    """Which glyphs define the reference ascent and descent of a font."""

    TEXT = 0
    EXTENDED_TEXT = 1
    ALL = 2


class VerticalPosition(Enum):
    """Which part of the text the y coordinate of a draw call refers to."""

    BASELINE = "baseline"
    BOTTOM = "bottom"
    TOP = "top"
    CENTER = "center"


def _add_vector(x: int, y: int, dx: int, dy: int, direction: int) -> tuple[int, int]:
    """Add ``(dx, dy)`` to ``(x, y)`` after rotating it by ``direction`` quarter turns."""
    if direction == 0:
        return x + dx, y + dy
    if direction == 1:
        return x - dy, y + dx
    if direction == 2:
        return x - dx, y - dy
    return x + dy, y - dx


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _encoding(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        return ord(value)
    return value


def _ascii_codes(s: str | bytes) -> Iterator[int]:
    """Yield the bytes of ``s`` up to the first NUL or newline."""
    data = s.encode("utf-8") if isinstance(s, str) else bytes(s)
    for b in data:
        if b in (0, 0x0A):
            return
        yield b


def _utf8_codes(s: str | bytes) -> Iterator[int]:
    """Yield the code points of ``s`` up to the first NUL or newline."""
    text = s if isinstance(s, str) else bytes(s).decode("utf-8")
    for ch in text:
        if ch in "\0\n":
            return
        yield ord(ch)


class TextRenderer:
    """Draws and measures text on a :class:`Canvas` with a :class:`Font`.

    The renderer keeps the font state: current font, transparency, direction
    (0 right, 1 down, 2 left, 3 up), reference height mode and the vertical
    reference position of the y coordinate.
    """

    def __init__(self, canvas: Canvas, font: Font | bytes | None = None) -> None:
        self.canvas = canvas
        self._font: Font | None = None
        self.is_transparent = False
        self.direction = 0
        self.height_mode = HeightMode.TEXT
        self.position = VerticalPosition.BASELINE
        self.ascent = 0
        self.descent = 0

        self._target_x = 0
        self._target_y = 0
        self._x = 0
        self._y = 0
        self._glyph_w = 0
        self._glyph_h = 0
        self._glyph_x_offset = 0
        self._fg = 1
        self._bg = 0

        if font is not None:
            self.set_font(font)

    # ------------------------------------------------------------------
    # font state

    @property
    def font(self) -> Font:
        """The current font; raises RuntimeError if none has been set."""
        if self._font is None:
            raise RuntimeError("no font selected")
        return self._font

    def set_font(self, font: Font | bytes) -> None:
        """Select a font, given as a :class:`Font` or as raw font data."""
        if not isinstance(font, Font):
            data = bytes(font)
            if self._font is not None and self._font.data == data:
                return
            font = Font(data)
        if font is self._font:
            return
        self._font = font
        self._update_ref_height()

    def set_font_mode(self, is_transparent: bool) -> None:
        """Choose transparent (background untouched) or solid glyph drawing."""
        self.is_transparent = bool(is_transparent)

    def set_font_direction(self, direction: int) -> None:
        """Set the text direction: 0 right, 1 down, 2 left, 3 up."""
        if direction not in (0, 1, 2, 3):
            raise ValueError("direction must be 0, 1, 2 or 3")
        self.direction = direction

    def _update_ref_height(self) -> None:
        if self._font is None:
            return
        info = self._font.info
        ascent = info.ascent_A
        descent = info.descent_g
        if self.height_mode == HeightMode.EXTENDED_TEXT:
            ascent = max(ascent, info.ascent_para)
            descent = min(descent, info.descent_para)
        elif self.height_mode == HeightMode.ALL:
            ascent = max(ascent, info.max_char_height + info.y_offset)
            descent = min(descent, info.y_offset)
        self.ascent = ascent
        self.descent = descent

    def set_font_ref_height_text(self) -> None:
        """Use the capital A and lower g as reference height."""
        self.height_mode = HeightMode.TEXT
        self._update_ref_height()

    def set_font_ref_height_extended_text(self) -> None:
        """Also include the parentheses in the reference height."""
        self.height_mode = HeightMode.EXTENDED_TEXT
        self._update_ref_height()

    def set_font_ref_height_all(self) -> None:
        """Use the bounding box of all glyphs as reference height."""
        self.height_mode = HeightMode.ALL
        self._update_ref_height()

    def set_font_pos(self, position: VerticalPosition) -> None:
        """Select what the y coordinate of draw calls refers to."""
        self.position = VerticalPosition(position)

    def calc_vref(self) -> int:
        """Offset from the given y coordinate to the baseline."""
        if self.position is VerticalPosition.BOTTOM:
            return self.descent
        if self.position is VerticalPosition.TOP:
            return self.ascent + 1
        if self.position is VerticalPosition.CENTER:
            return _trunc_div(self.ascent - self.descent, 2) + self.descent
        return 0

    # ------------------------------------------------------------------
    # glyph decoding

    def _glyph_offset(self, encoding: int) -> int | None:
        if not 0 <= encoding <= 0xFFFF:
            return None
        return self.font.glyph_offset(encoding)

    def _setup_decode(self, offset: int) -> BitReader:
        info = self.font.info
        reader = BitReader(self.font.data, offset)
        self._glyph_w = reader.unsigned(info.bits_per_char_width)
        self._glyph_h = reader.unsigned(info.bits_per_char_height)
        self._fg = self.canvas.draw_color
        self._bg = 1 if self._fg == 0 else 0
        return reader

    def _draw_run(self, lx: int, ly: int, count: int, is_foreground: bool, doubled: bool) -> None:
        if is_foreground:
            color = self._fg
        elif not self.is_transparent:
            color = self._bg
        else:
            return
        canvas = self.canvas
        canvas.draw_color = color
        if doubled:
            x = self._target_x + lx * 2
            y = self._target_y + ly * 2
            canvas.draw_hvline(x, y, count * 2, 0)
            canvas.draw_hvline(x, y + 1, count * 2, 0)
        else:
            x, y = _add_vector(self._target_x, self._target_y, lx, ly, self.direction)
            canvas.draw_hvline(x, y, count, self.direction)

    def _decode_len(self, length: int, is_foreground: bool, doubled: bool) -> None:
        cnt = length
        lx, ly = self._x, self._y
        while True:
            rem = self._glyph_w - lx
            current = cnt if cnt < rem else rem
            self._draw_run(lx, ly, current, is_foreground, doubled)
            if cnt < rem:
                break
            cnt -= rem
            lx = 0
            ly += 1
        self._x = lx + cnt
        self._y = ly

    def _glyph_box(self, h: int) -> tuple[int, int, int, int]:
        x0 = x1 = self._target_x
        y0 = y1 = self._target_y
        w = self._glyph_w
        direction = self.direction
        if direction == 0:
            x1 += w
            y1 += h
        elif direction == 1:
            x0 = x0 - h + 1
            x1 += 1
            y1 += w
        elif direction == 2:
            x0 = x0 - w + 1
            x1 += 1
            y0 = y0 - h + 1
            y1 += 1
        else:
            x1 += h
            y0 = y0 - w + 1
            y1 += 1
        return x0, y0, x1, y1

    def _decode_glyph(self, offset: int, doubled: bool) -> int:
        info = self.font.info
        reader = self._setup_decode(offset)
        h = self._glyph_h
        x = reader.signed(info.bits_per_char_x)
        y = reader.signed(info.bits_per_char_y)
        d = reader.signed(info.bits_per_delta_x)

        if self._glyph_w > 0:
            if doubled:
                self._target_x += x
                self._target_y -= 2 * h + y
                box = (
                    self._target_x,
                    self._target_y,
                    self._target_x + 2 * self._glyph_w,
                    self._target_y + 2 * h,
                )
            else:
                self._target_x, self._target_y = _add_vector(
                    self._target_x, self._target_y, x, -(h + y), self.direction
                )
                box = self._glyph_box(h)
            if not self.canvas.is_intersection(*box):
                return d

            self._x = 0
            self._y = 0
            while True:
                a = reader.unsigned(info.bits_per_0)
                b = reader.unsigned(info.bits_per_1)
                while True:
                    self._decode_len(a, False, doubled)
                    self._decode_len(b, True, doubled)
                    if reader.unsigned(1) == 0:
                        break
                if self._y >= h:
                    break
            self.canvas.draw_color = self._fg
        return d * 2 if doubled else d

    def _render_glyph(self, x: int, y: int, encoding: int, doubled: bool) -> int:
        self._target_x = x
        self._target_y = y
        offset = self._glyph_offset(encoding)
        if offset is None:
            return 0
        return self._decode_glyph(offset, doubled)

    # ------------------------------------------------------------------
    # drawing

    def draw_glyph(self, x: int, y: int, encoding: int | str) -> int:
        """Draw one glyph and return its advance width."""
        x, y = _add_vector(x, y, 0, self.calc_vref(), self.direction)
        return self._render_glyph(x, y, _encoding(encoding), False)

    def draw_glyph_x2(self, x: int, y: int, encoding: int | str) -> int:
        """Draw one glyph at double size (left to right only); return its advance."""
        y += 2 * self.calc_vref()
        return self._render_glyph(x, y, _encoding(encoding), True)

    def _draw_string(self, x: int, y: int, codes: Iterable[int], doubled: bool) -> int:
        total = 0
        for e in codes:
            if doubled:
                delta = self.draw_glyph_x2(x, y, e)
                x += delta
            else:
                delta = self.draw_glyph(x, y, e)
                x, y = _add_vector(x, y, delta, 0, self.direction)
            total += delta
        return total

    def draw_str(self, x: int, y: int, s: str | bytes) -> int:
        """Draw each byte of ``s`` as a glyph; return the total advance."""
        return self._draw_string(x, y, _ascii_codes(s), False)

    def draw_str_x2(self, x: int, y: int, s: str | bytes) -> int:
        """Like :meth:`draw_str`, at double size."""
        return self._draw_string(x, y, _ascii_codes(s), True)

    def draw_utf8(self, x: int, y: int, s: str | bytes) -> int:
        """Draw each code point of ``s`` as a glyph; return the total advance."""
        return self._draw_string(x, y, _utf8_codes(s), False)

    def draw_utf8_x2(self, x: int, y: int, s: str | bytes) -> int:
        """Like :meth:`draw_utf8`, at double size."""
        return self._draw_string(x, y, _utf8_codes(s), True)

    def draw_extended_utf8(
        self,
        x: int,
        y: int,
        to_left: bool,
        kerning: KerningTable | None,
        s: str | bytes,
    ) -> int:
        """Draw ``s`` with kerning from a :class:`KerningTable`, optionally right to left."""
        e_prev = NO_PREVIOUS
        total = 0
        for e in _utf8_codes(s):
            delta = self.glyph_width(e)
            if to_left:
                k = kerning.lookup(e, e_prev) if kerning is not None else 0
                delta -= k
                x -= delta
            else:
                k = kerning.lookup(e_prev, e) if kerning is not None else 0
                delta -= k
            e_prev = e
            self.draw_glyph(x, y, e)
            if not to_left:
                x += delta
                x -= k
            total += delta
        return total

    def draw_ext_utf8(
        self,
        x: int,
        y: int,
        to_left: bool,
        kerning_table: Sequence[int] | None,
        s: str | bytes,
    ) -> int:
        """Draw ``s`` with kerning from a flat ``(first, second, value)`` table."""
        e_prev = NO_PREVIOUS
        total = 0
        for e in _utf8_codes(s):
            delta = self.glyph_width(e)
            if to_left:
                k = kerning_by_table(kerning_table, e, e_prev)
                delta -= k
                x -= delta
            else:
                k = kerning_by_table(kerning_table, e_prev, e)
                delta -= k
            e_prev = e
            if not to_left:
                x += delta
            self.draw_glyph(x, y, e)
            total += delta
        return total

    # ------------------------------------------------------------------
    # measuring

    def is_glyph(self, encoding: int | str) -> bool:
        """True if the current font has a glyph for ``encoding``."""
        return self._glyph_offset(_encoding(encoding)) is not None

    def glyph_width(self, encoding: int | str) -> int:
        """Return the advance width of a glyph, or 0 if the font lacks it."""
        offset = self._glyph_offset(_encoding(encoding))
        if offset is None:
            return 0
        info = self.font.info
        reader = self._setup_decode(offset)
        self._glyph_x_offset = reader.signed(info.bits_per_char_x)
        reader.signed(info.bits_per_char_y)
        return reader.signed(info.bits_per_delta_x)

    def _string_width(self, codes: Iterable[int]) -> int:
        self._glyph_w = 0
        width = 0
        dx = 0
        for e in codes:
            dx = self.glyph_width(e)
            width += dx
        if self._glyph_w != 0:
            width = width - dx + self._glyph_w + self._glyph_x_offset
        return width

    def str_width(self, s: str | bytes) -> int:
        """Pixel width of ``s`` drawn with :meth:`draw_str`."""
        return self._string_width(_ascii_codes(s))

    def utf8_width(self, s: str | bytes) -> int:
        """Pixel width of ``s`` drawn with :meth:`draw_utf8`."""
        return self._string_width(_utf8_codes(s))

    def is_all_valid_utf8(self, s: str | bytes) -> bool:
        """True if the font has a glyph for every code point of ``s``."""
        return all(self._glyph_offset(e) is not None for e in _utf8_codes(s))

    def str_x(self, s: str | bytes) -> int:
        """Return the x offset of the first glyph of ``s`` (0 if it has none)."""
        encoding = (ord(s[0]) if isinstance(s, str) else s[0]) if len(s) else 0
        offset = self._glyph_offset(encoding)
        if offset is None:
            return 0
        reader = self._setup_decode(offset)
        return reader.signed(self.font.info.bits_per_char_x)