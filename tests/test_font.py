import random

import pytest

from monodraw.font import FONT_DATA_STRUCT_SIZE, BitReader, Font, FontInfo, font_size


def _header():
    return bytes(
        [
            3,  # glyph_cnt
            0,  # bbx_mode
            2,  # bits_per_0
            2,  # bits_per_1
            3,  # bits_per_char_width
            3,  # bits_per_char_height
            2,  # bits_per_char_x
            2,  # bits_per_char_y
            3,  # bits_per_delta_x
            4,  # max_char_width
            5,  # max_char_height
            0,  # x_offset
            0xFF,  # y_offset
            5,  # ascent_A
            0xFE,  # descent_g
            6,  # ascent_para
            0xFD,  # descent_para
            0x00, 0x00,  # start 'A'
            0x00, 0x04,  # start 'a'
            0x00, 0x09,  # start unicode
        ]
    )


def _body():
    ascii_part = bytes([65, 4, 0xAB, 0xCD, 97, 3, 0x12, 0, 0])
    lookup = bytes([0x00, 0x04, 0xFF, 0xFF])
    unicode_part = bytes([0x01, 0x00, 4, 0x55, 0x00, 0x00])
    return ascii_part + lookup + unicode_part


FONT_DATA = _header() + _body()


def _pack(fields):
    value = 0
    shift = 0
    for width, field in fields:
        value |= field << shift
        shift += width
    return value.to_bytes((shift + 7) // 8 + 1, "little")


def test_header_fields():
    info = FontInfo.from_bytes(FONT_DATA)
    assert info.glyph_cnt == 3
    assert info.bits_per_delta_x == 3
    assert info.max_char_height == 5
    assert info.y_offset == -1
    assert info.descent_g == -2
    assert info.descent_para == -3
    assert info.start_pos_lower_a == 4
    assert info.start_pos_unicode == 9


def test_header_too_short():
    with pytest.raises(ValueError):
        FontInfo.from_bytes(FONT_DATA[: FONT_DATA_STRUCT_SIZE - 1])


def test_font_size_matches_data_length():
    assert font_size(FONT_DATA) == len(FONT_DATA)
    assert font_size(FONT_DATA + b"\x99\x99") == len(FONT_DATA)


def test_font_size_truncated():
    with pytest.raises(ValueError):
        font_size(FONT_DATA[:28])


def test_glyph_offset_ascii():
    font = Font(FONT_DATA)
    assert FONT_DATA[font.glyph_offset(65)] == 0xAB
    assert FONT_DATA[font.glyph_offset("a")] == 0x12
    assert font.glyph_offset("A") == font.glyph_offset(65)


def test_glyph_offset_unicode():
    font = Font(FONT_DATA)
    offset = font.glyph_offset(0x100)
    assert FONT_DATA[offset] == 0x55


@pytest.mark.parametrize("encoding", [32, ord("Z"), ord("b"), 0x101, 0x7FFF])
def test_missing_glyphs(encoding):
    font = Font(FONT_DATA)
    assert font.glyph_offset(encoding) is None
    assert font.has_glyph(encoding) is False


def test_has_glyph_present():
    font = Font(FONT_DATA)
    assert font.has_glyph("A") is True
    assert font.has_glyph(0x100) is True


def test_glyph_offset_rejects_bad_encoding():
    font = Font(FONT_DATA)
    with pytest.raises(ValueError):
        font.glyph_offset(0x10000)
    with pytest.raises(ValueError):
        font.glyph_offset("ab")


def test_bit_reader_round_trip():
    rng = random.Random(1234)
    for _ in range(50):
        fields = []
        for _ in range(12):
            width = rng.randint(1, 8)
            fields.append((width, rng.randrange(1 << width)))
        reader = BitReader(_pack(fields))
        assert [reader.unsigned(w) for w, _ in fields] == [v for _, v in fields]


def test_bit_reader_offset_and_zero_bits():
    reader = BitReader(b"\x00\xff", 1)
    assert reader.unsigned(0) == 0
    assert reader.unsigned(8) == 0xFF
    assert reader.position == 2
    assert reader.bit_pos == 0


def test_signed_range_from_source_comment():
    assert BitReader(b"\x00\x00").signed(3) == -4
    assert BitReader(b"\x07\x00").signed(3) == 3
    assert BitReader(b"\x00\x00").signed(2) == -2


def test_signed_round_trip():
    for count in range(1, 9):
        for raw in range(1 << count):
            reader = BitReader(_pack([(count, raw)]))
            value = reader.signed(count)
            assert -(1 << (count - 1)) <= value < (1 << (count - 1))
            assert value + (1 << (count - 1)) == raw


def test_bit_reader_errors():
    with pytest.raises(ValueError):
        BitReader(b"\x00").signed(0)
    with pytest.raises(ValueError):
        BitReader(b"\x00").unsigned(9)
    reader = BitReader(b"\x00")
    reader.unsigned(4)
    with pytest.raises(ValueError):
        reader.unsigned(6)