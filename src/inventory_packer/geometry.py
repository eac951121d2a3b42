"""Rectangle utilities for the inventory grid."""

from __future__ import annotations

from typing import Iterator

Rect = tuple[int, int, int, int]


def rects_overlap(a: Rect, b: Rect) -> bool:
    """
    Axis-aligned rectangle overlap test.

    a, b are (x, y, width, height) in cells.

    Touching edges (ax + aw == bx) is NOT considered overlap.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b

    return (ax < bx + bw and ax + aw > bx) and (ay < by + bh and ay + ah > by)


def rect_within(rect: Rect, width: int, height: int) -> bool:
    """True if the rectangle has a positive size and lies inside a width x height grid."""
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return False
    return x >= 0 and y >= 0 and x + w <= width and y + h <= height


def rect_cells(rect: Rect) -> Iterator[tuple[int, int]]:
    """Yield (x, y) for every cell covered by the rectangle, row by row."""
    x, y, w, h = rect
    for row in range(y, y + h):
        for col in range(x, x + w):
            yield col, row
