"""Compressed bitmap font data: header, glyph lookup and bit-level decoding."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["FONT_DATA_STRUCT_SIZE", "FontInfo", "BitReader", "Font", "font_size"]

#: Size of the font header in bytes.
FONT_DATA_STRUCT_SIZE = 23


def _byte(data: bytes, offset: int) -> int:
    if not 0 <= offset < len(data):
        raise ValueError(f"font data truncated at offset {offset}")
    return data[offset]


def _word(data: bytes, offset: int) -> int:
    """Read a big-endian 16-bit value."""
    return (_byte(data, offset) << 8) | _byte(data, offset + 1)


def _signed8(value: int) -> int:
    return value - 0x100 if value >= 0x80 else value


@dataclass(frozen=True)
class FontInfo:
    """The fixed header at the start of every font."""

    glyph_cnt: int
    bbx_mode: int
    bits_per_0: int
    bits_per_1: int
    bits_per_char_width: int
    bits_per_char_height: int
    bits_per_char_x: int
    bits_per_char_y: int
    bits_per_delta_x: int
    max_char_width: int
    max_char_height: int
    x_offset: int
    y_offset: int
    ascent_A: int
    descent_g: int
    ascent_para: int
    descent_para: int
    start_pos_upper_A: int
    start_pos_lower_a: int
    start_pos_unicode: int

    @classmethod
    def from_bytes(cls, data: bytes) -> FontInfo:
        """Parse the header of ``data``; raises ValueError if it is too short."""
        data = bytes(data)
        if len(data) < FONT_DATA_STRUCT_SIZE:
            raise ValueError(
                f"font header needs {FONT_DATA_STRUCT_SIZE} bytes, got {len(data)}"
            )
        return cls(
            glyph_cnt=data[0],
            bbx_mode=data[1],
            bits_per_0=data[2],
            bits_per_1=data[3],
            bits_per_char_width=data[4],
            bits_per_char_height=data[5],
            bits_per_char_x=data[6],
            bits_per_char_y=data[7],
            bits_per_delta_x=data[8],
            max_char_width=data[9],
            max_char_height=data[10],
            x_offset=_signed8(data[11]),
            y_offset=_signed8(data[12]),
            ascent_A=_signed8(data[13]),
            descent_g=_signed8(data[14]),
            ascent_para=_signed8(data[15]),
            descent_para=_signed8(data[16]),
            start_pos_upper_A=_word(data, 17),
            start_pos_lower_a=_word(data, 19),
            start_pos_unicode=_word(data, 21),
        )


class BitReader:
    """Reads fields of up to 8 bits from a byte string, least significant bit first."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self.data = bytes(data)
        self.position = offset
        self.bit_pos = 0

    def unsigned(self, count: int) -> int:
        """Read ``count`` bits (0..8) as an unsigned value."""
        if not 0 <= count <= 8:
            raise ValueError("bit count must be between 0 and 8")
        bit_pos = self.bit_pos
        value = _byte(self.data, self.position) >> bit_pos
        end = bit_pos + count
        if end >= 8:
            self.position += 1
            if end > 8:
                value |= _byte(self.data, self.position) << (8 - bit_pos)
            end -= 8
        self.bit_pos = end
        return value & 0xFF & ((1 << count) - 1)

    def signed(self, count: int) -> int:
        """Read ``count`` bits (1..8) as a value offset by ``-(1 << (count - 1))``."""
        if not 1 <= count <= 8:
            raise ValueError("bit count must be between 1 and 8")
        return self.unsigned(count) - (1 << (count - 1))


class Font:
    """A font in the compressed run-length format, with its parsed header."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.info = FontInfo.from_bytes(self.data)

    def glyph_offset(self, encoding: int | str) -> int | None:
        """Return the offset of the glyph's bit stream in :attr:`data`, or None."""
        if isinstance(encoding, str):
            if len(encoding) != 1:
                raise ValueError("expected a single character")
            encoding = ord(encoding)
        if not 0 <= encoding <= 0xFFFF:
            raise ValueError("encoding must fit in 16 bits")
        data = self.data
        pos = FONT_DATA_STRUCT_SIZE

        if encoding <= 0xFF:
            if encoding >= ord("a"):
                pos += self.info.start_pos_lower_a
            elif encoding >= ord("A"):
                pos += self.info.start_pos_upper_A
            while True:
                size = _byte(data, pos + 1)
                if size == 0:
                    return None
                if data[pos] == encoding:
                    return pos + 2
                pos += size

        pos += self.info.start_pos_unicode
        table = pos
        while True:
            pos += _word(data, table)
            e = _word(data, table + 2)
            table += 4
            if e >= encoding:
                break
        while True:
            e = _word(data, pos)
            if e == 0:
                return None
            if e == encoding:
                return pos + 3
            size = _byte(data, pos + 2)
            if size == 0:
                raise ValueError(f"glyph of size 0 at offset {pos}")
            pos += size

    def has_glyph(self, encoding: int | str) -> bool:
        """True if the font contains a glyph for ``encoding``."""
        return self.glyph_offset(encoding) is not None


def font_size(data: bytes) -> int:
    """Return the total length in bytes of the font stored at the start of ``data``."""
    data = bytes(data)
    pos = FONT_DATA_STRUCT_SIZE
    while True:
        size = _byte(data, pos + 1)
        if size == 0:
            break
        pos += size
    pos += 2
    pos += _word(data, pos)
    while True:
        if _word(data, pos) == 0:
            break
        size = _byte(data, pos + 2)
        if size == 0:
            raise ValueError(f"glyph of size 0 at offset {pos}")
        pos += size
    return pos + 2