"""Pixel-level rasterization primitives.

These functions operate on a numpy ``uint8`` array of shape
``(height, width, 3)``.  Coordinates are ``(x, y)`` with the origin
at the top-left corner.  Out-of-bounds pixels are silently clipped and
colours whose alpha byte is zero are not written.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np

from .colour import is_transparent, to_rgb

Point = Tuple[float, float]


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[Tuple[int, int]]:
    """Yield every integer pixel on the segment from ``(x0, y0)`` to ``(x1, y1)``.

    Works in all octants.  A zero-length segment yields its single
    endpoint.
    """
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def set_pixel(buffer: np.ndarray, x: float, y: float, colour: int) -> None:
    if is_transparent(colour):
        return
    px = int(round(x))
    py = int(round(y))
    height, width = buffer.shape[:2]
    if 0 <= px < width and 0 <= py < height:
        buffer[py, px] = to_rgb(colour)


def clip_segment(
    x0: float, y0: float, x1: float, y1: float, xmax: float, ymax: float
) -> Optional[Tuple[float, float, float, float]]:
    """Clip a segment to the rectangle ``[0, xmax] x [0, ymax]``.

    Uses the Liang-Barsky parametric test.  Returns the clipped
    endpoints, or ``None`` when the segment lies entirely outside.
    """
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0), (dx, xmax - x0), (-dy, y0), (dy, ymax - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy


def draw_line(buffer: np.ndarray, p1: Point, p2: Point, colour: int) -> None:
    """Rasterize a straight segment between two (near-)integer points.

    The segment is clipped to the buffer first, so the work done is
    proportional to the visible part only.
    """
    if is_transparent(colour):
        return
    rgb = to_rgb(colour)
    height, width = buffer.shape[:2]
    x0, y0 = int(round(p1[0])), int(round(p1[1]))
    x1, y1 = int(round(p2[0])), int(round(p2[1]))
    clipped = clip_segment(x0, y0, x1, y1, width - 1, height - 1)
    if clipped is None:
        return
    cx0, cy0, cx1, cy1 = (int(round(v)) for v in clipped)
    for x, y in bresenham(cx0, cy0, cx1, cy1):
        if 0 <= x < width and 0 <= y < height:
            buffer[y, x] = rgb


def fill_rect(buffer: np.ndarray, x0: int, y0: int, x1: int, y1: int, colour: int) -> None:
    """Fill the inclusive rectangle spanned by two corners.

    Corners may be given in any order; the rectangle is clipped to the
    buffer.
    """
    if is_transparent(colour):
        return
    height, width = buffer.shape[:2]
    left, right = sorted((int(x0), int(x1)))
    top, bottom = sorted((int(y0), int(y1)))
    left = max(left, 0)
    top = max(top, 0)
    right = min(right, width - 1)
    bottom = min(bottom, height - 1)
    if left > right or top > bottom:
        return
    buffer[top:bottom + 1, left:right + 1] = to_rgb(colour)
