# monodraw

A small, dependency-free graphics library for monochrome (1 bit per pixel)
images. Everything is drawn into in-memory tile buffers that use the byte
layouts common display controllers expect. You can read the bytes or check
single pixels.

## Modules

- `monodraw.framebuffer`: `TileBuffer` is a buffer of 8x8 pixel tiles with
  one of two `BufferLayout`s:
  - `VERTICAL_TOP_LSB`: vertical bytes, least significant bit on top.
  - `HORIZONTAL_RIGHT_LSB`: horizontal bytes, most significant bit on the left.

  `hvline` draws with colour 0 (clear), 1 (set) or 2 (invert). `get_pixel`
  reads a pixel back.
- `monodraw.canvas`: `Canvas(width, height, page_rows=None, layout=..., rotation=Rotation.R0)`.
  - Rotations and mirroring: `Rotation.R0`, `R1`, `R2`, `R3`, `MIRROR` and
    `MIRROR_VERTICAL`.
  - Clip windows: `set_clip_window` and `set_max_clip_window`.
  - Drawing: `draw_hvline` (directions 0 to 3), `draw_hline`, `draw_vline`,
    `draw_pixel` and `draw_line`.
  - Draw colours are chosen with `set_draw_color`.
  - By default the buffer covers the whole display. With `page_rows` set, it
    holds only that many tile rows. `pages()` then yields once per page and
    copies each finished page into `canvas.memory`. `clear_display()` runs
    every page and returns to the first row.
- `monodraw.polygon`: scan-line filling of convex polygons with up to six
  points, through `Polygon` and `draw_triangle`.
- `monodraw.font`: reads fonts in a compressed run-length bitmap format.
  - `Font` holds the data and finds glyphs with `glyph_offset` and `has_glyph`.
  - `FontInfo` is the 23-byte header.
  - `BitReader` reads the bit fields.
  - `font_size` returns the total length of a font.
- `monodraw.text`: `TextRenderer(canvas, font)` draws and measures text.
  - Glyphs: `draw_glyph` and `draw_glyph_x2`.
  - Byte strings and UTF-8: `draw_str` and `draw_utf8`, each with an `_x2`
    variant.
  - Kerned text: `draw_extended_utf8` and `draw_ext_utf8`.
  - Measuring: `glyph_width`, `str_width`, `utf8_width` and `str_x`.
  - Checks: `is_glyph` and `is_all_valid_utf8`.
  - Four text directions.
  - Transparent or solid glyphs.
  - Reference heights through the `set_font_ref_height_*` methods.
  - Vertical positions (`VerticalPosition`) through `set_font_pos`.
- `monodraw.kerning`: `KerningTable.lookup` for two-level tables and
  `kerning_by_table` for flat `(first, second, value)` tables ending in
  `0xFFFF`.
- `monodraw.textlog`: `TextLog(width, height)` is a scrolling character
  screen.
  - Handles `\n`, `\r`, `\t` and `\f`.
  - Writes hex and decimal values.
  - Calls a callback given to `set_callback` when a redraw is due.
  - `lines()` returns the screen rows.
- `monodraw.intersection`: half-open range intersection
  (`is_intersection_decision_tree`) and span clipping (`clip_intersection`).
- `monodraw.ui`: helpers and dialogs that draw through a `TextRenderer`.
  - Drawing helpers: `draw_utf8_line`, `draw_utf8_lines`,
    `draw_selection_list`, `draw_button_line` and `draw_log`, which renders a
    `TextLog`.
  - Dialogs: `selection_list_dialog`, `message_dialog` and
    `input_value_dialog`.
  - The dialogs read `MenuEvent` values from any iterable and raise
    `EOFError` if the events run out first.

## Example

```python
from monodraw.canvas import Canvas, Rotation
from monodraw.polygon import draw_triangle

canvas = Canvas(128, 64, rotation=Rotation.R0)
canvas.draw_line(0, 0, 127, 63)
canvas.draw_hline(10, 5, 20)
draw_triangle(canvas, 10, 10, 40, 10, 25, 40)
print(canvas.get_pixel(20, 5))  # True
```

Drawing page by page:

```python
canvas = Canvas(128, 64, page_rows=2)
for _ in canvas.pages():
    canvas.draw_line(0, 0, 127, 63)
print(canvas.get_pixel(64, 32))
```

A text log:

```python
from monodraw.textlog import TextLog

log = TextLog(20, 4)
log.write("hello\n")
log.write_hex16(0xBEEF)
print(log.lines())
```

## What it does not do

- It does not talk to any display hardware. It does not send buffers
  anywhere; the bytes stay in `TileBuffer.data` and `Canvas.memory`.
- It ships no fonts. To draw text, pass font data in the compressed format to
  `Font` or `TextRenderer`.
- It has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```