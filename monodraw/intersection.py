"""Range intersection and clipping helpers with half-open boundaries."""

from __future__ import annotations

__all__ = ["is_intersection_decision_tree", "clip_intersection"]


def is_intersection_decision_tree(a0: int, a1: int, v0: int, v1: int) -> bool:
    """Return True if the range ``[v0, v1)`` touches ``[a0, a1)``.

    Upper limits are excluded. A range with ``v0 > v1`` is treated as
    wrapping around, as happens with negative coordinates in unsigned
    arithmetic.
    """
    if v0 < a1:
        if v1 > a0:
            return True
        return v0 > v1
    if v1 > a0:
        return v0 > v1
    return False


def clip_intersection(a: int, length: int, c: int, d: int) -> tuple[int, int] | None:
    """Clip the span starting at ``a`` with ``length`` pixels against ``[c, d)``.

    Returns the clipped ``(start, length)`` pair, or ``None`` when nothing of
    the span lies within the window. ``c <= d`` is assumed.
    """
    b = a + length
    if a > b:
        if a < d:
            b = d - 1
        else:
            a = c
    if a >= d or b <= c:
        return None
    a = max(a, c)
    b = min(b, d)
    return a, b - a