import pytest

from monodraw.canvas import Canvas, Rotation
from monodraw.framebuffer import BufferLayout
from monodraw.polygon import draw_triangle


def lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y)
    }


def test_draw_pixel_sets_only_that_pixel():
    canvas = Canvas(32, 16)
    canvas.draw_pixel(5, 7)
    assert lit(canvas) == {(5, 7)}


@pytest.mark.parametrize("layout", list(BufferLayout))
def test_hline_and_vline_in_both_layouts(layout):
    canvas = Canvas(32, 16, layout=layout)
    canvas.draw_hline(2, 3, 10)
    canvas.draw_vline(20, 1, 9)
    expected = {(x, 3) for x in range(2, 12)} | {(20, y) for y in range(1, 10)}
    assert lit(canvas) == expected


def test_hvline_left_and_up_directions():
    canvas = Canvas(32, 32)
    canvas.draw_hvline(10, 5, 4, 2)
    canvas.draw_hvline(20, 20, 4, 3)
    expected = {(x, 5) for x in range(7, 11)} | {(20, y) for y in range(17, 21)}
    assert lit(canvas) == expected


def test_line_is_clipped_at_left_edge():
    canvas = Canvas(16, 8)
    canvas.draw_hline(-3, 0, 6)
    assert lit(canvas) == {(0, 0), (1, 0), (2, 0)}


def test_lines_outside_display_draw_nothing():
    canvas = Canvas(16, 8)
    canvas.draw_hline(0, 8, 5)
    canvas.draw_vline(16, 0, 5)
    canvas.draw_pixel(-1, 0)
    canvas.draw_hline(3, 3, 0)
    assert lit(canvas) == set()


def test_xor_color_twice_restores():
    canvas = Canvas(16, 16)
    canvas.draw_hline(0, 0, 10)
    canvas.set_draw_color(2)
    canvas.draw_hline(5, 0, 10)
    assert lit(canvas) == {(x, 0) for x in range(5)} | {(x, 0) for x in range(10, 15)}
    canvas.draw_hline(5, 0, 10)
    assert lit(canvas) == {(x, 0) for x in range(10)}


def test_color_zero_clears():
    canvas = Canvas(16, 16)
    canvas.draw_hline(0, 4, 8)
    canvas.set_draw_color(0)
    canvas.draw_hline(0, 4, 8)
    assert lit(canvas) == set()


def test_invalid_color_becomes_one():
    canvas = Canvas(8, 8)
    canvas.set_draw_color(7)
    assert canvas.draw_color == 1


def test_draw_line_endpoints_and_count():
    canvas = Canvas(64, 64)
    canvas.draw_line(3, 4, 40, 20)
    pixels = lit(canvas)
    assert (3, 4) in pixels and (40, 20) in pixels
    assert len(pixels) == max(40 - 3, 20 - 4) + 1


def test_draw_line_is_symmetric():
    a = Canvas(64, 64)
    b = Canvas(64, 64)
    a.draw_line(5, 50, 30, 2)
    b.draw_line(30, 2, 5, 50)
    assert lit(a) == lit(b)
    assert len(lit(a)) == 49


def test_rotation_swaps_dimensions():
    canvas = Canvas(128, 64, rotation=Rotation.R1)
    assert (canvas.width, canvas.height) == (64, 128)
    canvas.set_rotation(Rotation.R2)
    assert (canvas.width, canvas.height) == (128, 64)


@pytest.mark.parametrize("rotation", list(Rotation))
def test_rotated_drawing_round_trips(rotation):
    canvas = Canvas(32, 24, rotation=rotation)
    canvas.draw_hline(1, 2, 5)
    canvas.draw_vline(10, 3, 6)
    expected = {(x, 2) for x in range(1, 6)} | {(10, y) for y in range(3, 9)}
    assert lit(canvas) == expected


def test_r2_maps_origin_to_opposite_corner():
    canvas = Canvas(128, 64, rotation=Rotation.R2)
    canvas.draw_pixel(0, 0)
    assert canvas.buffer.get_pixel(127, 63)
    assert not canvas.buffer.get_pixel(0, 0)


def test_mirror_maps_origin_to_right_edge():
    canvas = Canvas(128, 64, rotation=Rotation.MIRROR)
    canvas.draw_pixel(0, 0)
    assert canvas.buffer.get_pixel(127, 0)


def test_clip_window_limits_drawing():
    canvas = Canvas(64, 32)
    canvas.set_clip_window(10, 10, 20, 20)
    canvas.draw_hline(0, 15, 50)
    canvas.draw_pixel(5, 5)
    assert lit(canvas) == {(x, 15) for x in range(10, 20)}
    canvas.set_max_clip_window()
    canvas.draw_hline(0, 16, 50)
    assert {(x, 16) for x in range(50)} <= lit(canvas)


def test_clip_window_outside_display_blocks_everything():
    canvas = Canvas(64, 32)
    canvas.set_clip_window(100, 100, 120, 120)
    assert canvas.is_page_clip_window_intersection is False
    canvas.draw_hline(0, 0, 64)
    assert lit(canvas) == set()


def test_is_intersection():
    canvas = Canvas(64, 32)
    assert canvas.is_intersection(0, 0, 10, 10)
    assert not canvas.is_intersection(64, 0, 70, 10)
    assert not canvas.is_intersection(0, 32, 10, 40)


def test_page_mode_renders_into_memory():
    canvas = Canvas(16, 16, page_rows=1)
    rows = []
    for row in canvas.pages():
        rows.append(row)
        canvas.draw_vline(3, 0, 16)
    assert rows == [0, 1]
    assert lit(canvas) == {(3, y) for y in range(16)}


def test_clear_display_resets_memory_and_row():
    canvas = Canvas(16, 16, page_rows=1)
    for _ in canvas.pages():
        canvas.draw_hline(0, 12, 16)
    assert lit(canvas)
    canvas.clear_display()
    assert lit(canvas) == set()
    assert canvas.tile_curr_row == 0


def test_clear_display_full_buffer_allows_drawing_after():
    canvas = Canvas(16, 16)
    canvas.draw_hline(0, 0, 16)
    canvas.clear_display()
    assert lit(canvas) == set()
    canvas.draw_pixel(15, 15)
    assert lit(canvas) == {(15, 15)}


def test_triangle_fill_on_canvas():
    canvas = Canvas(32, 32)
    draw_triangle(canvas, 2, 2, 28, 2, 2, 28)
    assert canvas.get_pixel(5, 5)
    assert not canvas.get_pixel(28, 28)


def test_invalid_arguments_raise():
    with pytest.raises(ValueError):
        Canvas(0, 8)
    with pytest.raises(ValueError):
        Canvas(8, 8, page_rows=0)
    canvas = Canvas(8, 8)
    with pytest.raises(IndexError):
        canvas.get_pixel(8, 0)