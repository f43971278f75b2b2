import pytest

from monodraw.framebuffer import BufferLayout, TileBuffer

LAYOUTS = [BufferLayout.VERTICAL_TOP_LSB, BufferLayout.HORIZONTAL_RIGHT_LSB]


def set_pixels(buf):
    return {
        (x, y)
        for y in range(buf.pixel_height)
        for x in range(buf.pixel_width)
        if buf.get_pixel(x, y)
    }


def test_vertical_layout_first_pixel_is_lsb():
    buf = TileBuffer(2, 1, BufferLayout.VERTICAL_TOP_LSB)
    buf.hvline(0, 0, 1, 0, 1)
    assert buf.data[0] == 0x01


def test_horizontal_layout_first_pixel_is_msb():
    buf = TileBuffer(2, 1, BufferLayout.HORIZONTAL_RIGHT_LSB)
    buf.hvline(0, 0, 1, 0, 1)
    assert buf.data[0] == 0x80


def test_buffer_size():
    buf = TileBuffer(3, 2)
    assert len(buf.data) == 3 * 2 * 8
    assert buf.pixel_width == 24
    assert buf.pixel_height == 16


@pytest.mark.parametrize("layout", LAYOUTS)
def test_horizontal_line_sets_exact_pixels(layout):
    buf = TileBuffer(2, 2, layout)
    buf.hvline(3, 9, 7, 0, 1)
    assert set_pixels(buf) == {(x, 9) for x in range(3, 10)}


@pytest.mark.parametrize("layout", LAYOUTS)
def test_vertical_line_crosses_page_boundary(layout):
    buf = TileBuffer(2, 2, layout)
    buf.hvline(1, 5, 6, 1, 1)
    assert set_pixels(buf) == {(1, y) for y in range(5, 11)}


@pytest.mark.parametrize("layout", LAYOUTS)
def test_color_zero_clears(layout):
    buf = TileBuffer(1, 1, layout)
    buf.hvline(0, 2, 8, 0, 1)
    buf.hvline(2, 2, 3, 0, 0)
    assert set_pixels(buf) == {(0, 2), (1, 2), (5, 2), (6, 2), (7, 2)}


@pytest.mark.parametrize("layout", LAYOUTS)
def test_color_two_inverts(layout):
    buf = TileBuffer(1, 1, layout)
    buf.hvline(0, 0, 4, 1, 1)
    buf.hvline(0, 2, 4, 1, 2)
    assert set_pixels(buf) == {(0, 0), (0, 1), (0, 4), (0, 5)}


@pytest.mark.parametrize("layout", LAYOUTS)
def test_double_xor_restores(layout):
    buf = TileBuffer(2, 1, layout)
    buf.hvline(1, 1, 10, 0, 1)
    before = bytes(buf.data)
    buf.hvline(0, 0, 8, 1, 2)
    buf.hvline(0, 0, 8, 1, 2)
    assert bytes(buf.data) == before


@pytest.mark.parametrize("layout", LAYOUTS)
def test_clear(layout):
    buf = TileBuffer(2, 1, layout)
    buf.hvline(0, 0, 16, 0, 1)
    assert len(set_pixels(buf)) == 16
    buf.clear()
    assert bytes(buf.data) == bytes(16)
    assert set_pixels(buf) == set()


def test_out_of_range_raises():
    buf = TileBuffer(1, 1)
    with pytest.raises(IndexError):
        buf.hvline(4, 0, 5, 0, 1)
    with pytest.raises(IndexError):
        buf.hvline(0, 7, 2, 1, 1)
    with pytest.raises(IndexError):
        buf.get_pixel(8, 0)


def test_out_of_range_leaves_buffer_untouched():
    buf = TileBuffer(1, 1)
    with pytest.raises(IndexError):
        buf.hvline(4, 0, 5, 0, 1)
    assert bytes(buf.data) == bytes(8)


def test_zero_length_raises():
    buf = TileBuffer(1, 1)
    with pytest.raises(ValueError):
        buf.hvline(0, 0, 0, 0, 1)


def test_bad_direction_raises():
    buf = TileBuffer(1, 1)
    with pytest.raises(ValueError):
        buf.hvline(0, 0, 1, 2, 1)


def test_bad_dimensions_raise():
    with pytest.raises(ValueError):
        TileBuffer(0, 1)