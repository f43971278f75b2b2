"""Simple interactive dialogs and multi-line text helpers.

The dialogs draw on the canvas of a :class:`TextRenderer` and read menu
events from an iterable. Items that are not :class:`MenuEvent` values are
ignored; when the iterable runs out before a dialog is finished,
``EOFError`` is raised.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .canvas import Canvas
from .text import TextRenderer, VerticalPosition
from .textlog import TextLog

__all__ = [
    "MenuEvent",
    "SelectionList",
    "draw_utf8_line",
    "draw_utf8_lines",
    "draw_selection_list",
    "draw_button_line",
    "selection_list_dialog",
    "message_dialog",
    "input_value_dialog",
    "draw_log",
    "SPACE_BETWEEN_BUTTONS",
    "SPACE_BETWEEN_TEXT_AND_BUTTONS",
    "BORDER_SIZE",
]

SPACE_BETWEEN_BUTTONS = 6
SPACE_BETWEEN_TEXT_AND_BUTTONS = 3
BORDER_SIZE = 1


class MenuEvent(Enum):
    """Buttons a dialog reacts to."""

    SELECT = "select"
    NEXT = "next"
    PREV = "prev"
    HOME = "home"
    UP = "up"
    DOWN = "down"


@dataclass
class SelectionList:
    """Cursor and scroll state of a list with ``visible`` rows out of ``total``."""

    visible: int
    total: int
    first_pos: int = 0
    current_pos: int = 0

    def next(self) -> None:
        """Move the cursor down, wrapping to the first entry."""
        self.current_pos += 1
        if self.current_pos >= self.total:
            self.current_pos = 0
            self.first_pos = 0
        elif self.first_pos + self.visible <= self.current_pos:
            self.first_pos = self.current_pos - self.visible + 1

    def prev(self) -> None:
        """Move the cursor up, wrapping to the last entry."""
        if self.current_pos == 0:
            self.current_pos = self.total - 1
            self.first_pos = self.total - self.visible if self.total > self.visible else 0
        else:
            self.current_pos -= 1
            if self.first_pos > self.current_pos:
                self.first_pos = self.current_pos


# ----------------------------------------------------------------------
# helpers


def _line_count(s: str | None) -> int:
    if s is None:
        return 0
    return s.count("\n") + 1


def _line(index: int, s: str | None) -> str | None:
    if s is None:
        return None
    lines = s.split("\n")
    return lines[index] if 0 <= index < len(lines) else None


def _lines(s: str | None) -> list[str]:
    return [] if s is None else s.split("\n")


def _u8toa(value: int, digits: int) -> str:
    if not 1 <= digits <= 3:
        raise ValueError("digits must be between 1 and 3")
    return format(value & 0xFF, "03d")[-digits:]


def _next_event(events: Iterator[object]) -> MenuEvent:
    for item in events:
        if isinstance(item, MenuEvent):
            return item
    raise EOFError("menu event stream ended")


def _draw_box(canvas: Canvas, x: int, y: int, w: int, h: int) -> None:
    for row in range(h):
        canvas.draw_hvline(x, y + row, w, 0)


def _draw_frame(canvas: Canvas, x: int, y: int, w: int, h: int) -> None:
    left = x
    canvas.draw_hline(x, y, w)
    if h >= 2:
        h -= 2
        y += 1
        if h > 0:
            canvas.draw_vline(x, y, h)
            canvas.draw_vline(x + w - 1, y, h)
            y += h
        canvas.draw_hline(left, y, w)


def _line_height(text: TextRenderer) -> int:
    return text.ascent - text.descent


# ----------------------------------------------------------------------
# drawing


def draw_utf8_line(
    text: TextRenderer,
    x: int,
    y: int,
    w: int,
    s: str,
    border_size: int,
    is_invert: bool,
) -> None:
    """Draw ``s`` centred within ``w`` pixels, optionally framed and inverted.

    Forces the font direction to 0 and leaves the draw color at 1.
    """
    canvas = text.canvas
    text.set_font_direction(0)
    y += text.calc_vref()
    str_width = text.utf8_width(s)
    d = 0
    if str_width < w:
        d = (w - str_width) // 2
    else:
        w = str_width

    fx = x
    fy = y - text.ascent
    fw = w
    fh = _line_height(text)

    canvas.set_draw_color(1)
    if is_invert:
        _draw_box(canvas, fx, fy, fw, fh)

    for _ in range(border_size):
        fx -= 1
        fy -= 1
        fw += 2
        fh += 2
        _draw_frame(canvas, fx, fy, fw, fh)

    canvas.set_draw_color(0 if is_invert else 1)
    text.draw_utf8(x + d, y, s)
    canvas.set_draw_color(1)


def draw_utf8_lines(
    text: TextRenderer, x: int, y: int, w: int, line_height: int, s: str | None
) -> int:
    """Draw the newline separated lines of ``s``; return lines times ``line_height``."""
    total = 0
    for line in _lines(s):
        draw_utf8_line(text, x, y, w, line, 0, False)
        y += line_height
        total += line_height
    return total


def _draw_selection_list_line(
    text: TextRenderer, selection: SelectionList, y: int, idx: int, s: str | None
) -> int:
    line_height = _line_height(text) + BORDER_SIZE
    is_current = idx == selection.current_pos
    line = _line(idx, s)
    draw_utf8_line(
        text,
        BORDER_SIZE,
        y,
        text.canvas.width - 2 * BORDER_SIZE,
        "" if line is None else line,
        BORDER_SIZE if is_current else 0,
        is_current,
    )
    return line_height


def draw_selection_list(
    text: TextRenderer, selection: SelectionList, y: int, s: str | None
) -> None:
    """Draw the visible rows of the list ``s``, highlighting the cursor row."""
    for i in range(selection.visible):
        y += _draw_selection_list_line(text, selection, y, i + selection.first_pos, s)


def draw_button_line(text: TextRenderer, y: int, w: int, cursor: int, s: str | None) -> int:
    """Draw the newline separated buttons of ``s`` centred in ``w``; return their count."""
    buttons = _lines(s)
    count = len(buttons)
    line_width = sum(text.utf8_width(b) for b in buttons)
    line_width += max(count - 1, 0) * SPACE_BETWEEN_BUTTONS
    x = (w - line_width) // 2 if line_width < w else 0
    for i, button in enumerate(buttons):
        draw_utf8_line(text, x, y, 0, button, 1, i == cursor)
        x += text.utf8_width(button) + SPACE_BETWEEN_BUTTONS
    return count


def draw_log(text: TextRenderer, x: int, y: int, log: TextLog) -> None:
    """Draw the screen of ``log``; ``(x, y)`` is the reference point of its first glyph."""
    text.set_font_direction(0)
    disp_y = y
    for row in range(log.height):
        disp_x = x
        for c in log.screen[row * log.width : (row + 1) * log.width]:
            disp_x += text.draw_glyph(disp_x, disp_y, c)
        disp_y += _line_height(text) + log.line_height_offset


# ----------------------------------------------------------------------
# dialogs


def selection_list_dialog(
    text: TextRenderer,
    title: str | None,
    start_pos: int,
    sl: str,
    events: Iterable[object],
) -> int:
    """Let the user pick a line of ``sl``.

    ``start_pos`` is the 1-based initial cursor. Returns the 1-based selected
    line, or 0 if HOME was pressed.
    """
    canvas = text.canvas
    event_iter = iter(events)
    line_height = _line_height(text) + BORDER_SIZE
    title_lines = _line_count(title)
    if start_pos > 0:
        start_pos -= 1

    if title_lines > 0:
        visible = (canvas.height - 3) // line_height - title_lines
    else:
        visible = canvas.height // line_height

    selection = SelectionList(visible=visible, total=_line_count(sl), current_pos=start_pos)
    if selection.current_pos >= selection.total:
        selection.current_pos = selection.total - 1
    if selection.first_pos + selection.visible <= selection.current_pos:
        selection.first_pos = selection.current_pos - selection.visible + 1

    text.set_font_pos(VerticalPosition.BASELINE)

    while True:
        for _ in canvas.pages():
            yy = text.ascent
            if title_lines > 0:
                yy += draw_utf8_lines(text, 0, yy, canvas.width, line_height, title)
                canvas.draw_hline(0, yy - line_height - text.descent + 1, canvas.width)
                yy += 3
            draw_selection_list(text, selection, yy, sl)

        event = _next_event(event_iter)
        if event is MenuEvent.SELECT:
            return selection.current_pos + 1
        if event is MenuEvent.HOME:
            return 0
        if event in (MenuEvent.NEXT, MenuEvent.DOWN):
            selection.next()
        else:
            selection.prev()


def message_dialog(
    text: TextRenderer,
    title1: str | None,
    title2: str | None,
    title3: str | None,
    buttons: str,
    events: Iterable[object],
) -> int:
    """Show a message with a row of buttons.

    ``title1`` and ``title3`` may hold several lines, ``title2`` one line.
    Returns the 1-based chosen button, or 0 if HOME was pressed.
    """
    canvas = text.canvas
    event_iter = iter(events)
    text.set_font_direction(0)
    text.set_font_pos(VerticalPosition.BASELINE)
    line_height = _line_height(text)

    height = 1 + _line_count(title1) + _line_count(title3)
    if title2 is not None:
        height += 1
    pixel_height = height * line_height + SPACE_BETWEEN_TEXT_AND_BUTTONS

    y = 0
    if pixel_height < canvas.height:
        y = (canvas.height - pixel_height) // 2
    y += text.ascent

    cursor = 0
    button_cnt = 0
    while True:
        for _ in canvas.pages():
            yy = y
            yy += draw_utf8_lines(text, 0, yy, canvas.width, line_height, title1)
            if title2 is not None:
                draw_utf8_line(text, 0, yy, canvas.width, title2, 0, False)
                yy += line_height
            yy += draw_utf8_lines(text, 0, yy, canvas.width, line_height, title3)
            yy += SPACE_BETWEEN_TEXT_AND_BUTTONS
            button_cnt = draw_button_line(text, yy, canvas.width, cursor, buttons)

        event = _next_event(event_iter)
        if event is MenuEvent.SELECT:
            return cursor + 1
        if event is MenuEvent.HOME:
            return 0
        if event in (MenuEvent.NEXT, MenuEvent.DOWN):
            cursor += 1
            if cursor >= button_cnt:
                cursor = 0
        else:
            cursor = (cursor - 1) % button_cnt if button_cnt else 0


def input_value_dialog(
    text: TextRenderer,
    title: str | None,
    pre: str,
    value: int,
    lo: int,
    hi: int,
    digits: int,
    post: str,
    events: Iterable[object],
) -> int | None:
    """Let the user change a number between ``lo`` and ``hi``, wrapping at both ends.

    Returns the chosen value, or None if HOME was pressed.
    """
    canvas = text.canvas
    event_iter = iter(events)
    text.set_font_direction(0)
    text.set_font_pos(VerticalPosition.BASELINE)
    line_height = _line_height(text)

    pixel_height = (1 + _line_count(title)) * line_height
    y = 0
    if pixel_height < canvas.height:
        y = (canvas.height - pixel_height) // 2

    pixel_width = text.utf8_width(pre)
    pixel_width += text.utf8_width("0") * digits
    pixel_width += text.utf8_width(post)
    x = 0
    if pixel_width < canvas.width:
        x = (canvas.width - pixel_width) // 2

    local_value = value
    while True:
        for _ in canvas.pages():
            yy = y + draw_utf8_lines(text, 0, y, canvas.width, line_height, title)
            xx = x
            xx += text.draw_utf8(xx, yy, pre)
            xx += text.draw_utf8(xx, yy, _u8toa(local_value, digits))
            text.draw_utf8(xx, yy, post)

        event = _next_event(event_iter)
        if event is MenuEvent.SELECT:
            return local_value
        if event is MenuEvent.HOME:
            return None
        if event in (MenuEvent.NEXT, MenuEvent.UP):
            local_value = lo if local_value >= hi else local_value + 1
        else:
            local_value = hi if local_value <= lo else local_value - 1