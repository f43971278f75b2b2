"""Scan-line filling of convex polygons."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

__all__ = ["MAX_POINTS", "Polygon", "draw_triangle"]

MAX_POINTS = 6


class HLineTarget(Protocol):
    """What a polygon needs to draw on: display size and horizontal lines."""

    width: int
    height: int

    def draw_hline(self, x: int, y: int, length: int) -> None: ...


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


@dataclass
class _Edge:
    """Bresenham-style walker along one polygon side, one scan line at a time."""

    next_index: Callable[[int], int]
    curr_idx: int = 0
    x_direction: int = 1
    height: int = 0
    current_x_offset: int = 0
    error_offset: int = 0
    current_y: int = 0
    max_y: int = 0
    current_x: int = 0
    error: int = 0

    def init(self, x1: int, y1: int, x2: int, y2: int) -> None:
        dx = x2 - x1
        self.height = y2 - y1
        self.max_y = y2
        self.current_y = y1
        self.current_x = x1
        if dx >= 0:
            self.x_direction = 1
            width = dx
            self.error = 0
        else:
            self.x_direction = -1
            width = -dx
            self.error = 1 - self.height
        if self.height > 0:
            self.current_x_offset = _trunc_div(dx, self.height)
            self.error_offset = width % self.height
        else:
            # A flat edge is exhausted at once; advance() never steps it.
            self.current_x_offset = 0
            self.error_offset = 0

    def advance(self) -> bool:
        if self.current_y >= self.max_y:
            return False
        self.current_x += self.current_x_offset
        self.error += self.error_offset
        if self.error > 0:
            self.current_x += self.x_direction
            self.error -= self.height
        self.current_y += 1
        return True


class Polygon:
    """A convex polygon of up to six points, filled by scan lines.

    Points beyond the sixth are ignored.
    """

    def __init__(self) -> None:
        self.points: list[tuple[int, int]] = []

    def clear(self) -> None:
        """Remove all points."""
        self.points.clear()

    def add_point(self, x: int, y: int) -> None:
        """Append a point unless the polygon already holds six."""
        if len(self.points) < MAX_POINTS:
            self.points.append((x, y))

    def _inc(self, i: int) -> int:
        return (i + 1) % len(self.points)

    def _dec(self, i: int) -> int:
        return (i - 1) % len(self.points)

    def _expand_min_y(self, edge: _Edge, min_y: int) -> None:
        i = edge.curr_idx
        while True:
            i = edge.next_index(i)
            if self.points[i][1] != min_y:
                break
            edge.curr_idx = i

    def _line_init(self, edge: _Edge) -> None:
        idx = edge.curr_idx
        x1, y1 = self.points[idx]
        idx = edge.next_index(idx)
        x2, y2 = self.points[idx]
        edge.curr_idx = idx
        edge.init(x1, y1, x2, y2)

    @staticmethod
    def _hline(canvas: HLineTarget, left: _Edge, right: _Edge) -> None:
        x1 = left.current_x
        x2 = right.current_x
        y = right.current_y
        width = canvas.width
        if y < 0 or y >= canvas.height:
            return
        if x1 < x2:
            if x2 < 0 or x1 >= width:
                return
            x1 = max(x1, 0)
            if x2 >= width:
                x2 = width
            canvas.draw_hline(x1, y, x2 - x1)
        else:
            if x1 < 0 or x2 >= width:
                return
            if x2 < 0:
                x1 = 0
            if x1 >= width:
                x1 = width
            canvas.draw_hline(x2, y, x1 - x2)

    def draw(self, canvas: HLineTarget) -> None:
        """Fill the polygon on ``canvas`` with horizontal lines."""
        if not self.points:
            return
        left = _Edge(self._dec)
        right = _Edge(self._inc)

        ys = [y for _, y in self.points]
        min_y = min(ys)
        max_y = max(ys)
        left.curr_idx = ys.index(min_y)
        scan_lines = max_y - min_y
        if scan_lines == 0:
            return

        right.curr_idx = left.curr_idx
        self._expand_min_y(right, min_y)
        self._expand_min_y(left, min_y)

        is_min_y_not_flat = True
        if self.points[left.curr_idx][0] != self.points[right.curr_idx][0]:
            is_min_y_not_flat = False
        else:
            scan_lines -= 1
            if scan_lines == 0:
                return

        self._line_init(left)
        self._line_init(right)
        if is_min_y_not_flat:
            left.advance()
            right.advance()

        for _ in range(scan_lines):
            self._hline(canvas, left, right)
            while not left.advance():
                self._line_init(left)
            while not right.advance():
                self._line_init(right)


def draw_triangle(
    canvas: HLineTarget, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int
) -> None:
    """Fill the triangle with the three given corners."""
    polygon = Polygon()
    polygon.add_point(x0, y0)
    polygon.add_point(x1, y1)
    polygon.add_point(x2, y2)
    polygon.draw(canvas)