from __future__ import annotations

import numpy as np

from rastergraph.raster.canvas import draw_pixel, fill_rect
from rastergraph.style import RGBA
from rastergraph.transform import stroke_span


def draw_line(
    dst: np.ndarray,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    color: RGBA,
    thickness: float = 1.0,
) -> None:
    """Stroke a segment with its width spread evenly across the centerline."""
    if x0 == x1:
        xa, xb = stroke_span(x0, thickness)
        fill_rect(dst, xa, y0, xb, y1, color)
        return
    if y0 == y1:
        ya, yb = stroke_span(y0, thickness)
        fill_rect(dst, x0, ya, x1, yb, color)
        return
    _draw_line_segment(dst, x0, y0, x1, y1, color=color, thickness=thickness)


def _draw_line_segment(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, thickness: float) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        _draw_square_brush(dst, x0, y0, color=color, thickness=thickness)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _draw_square_brush(dst: np.ndarray, x: int, y: int, color: RGBA, thickness: float) -> None:
    if thickness <= 1.0:
        draw_pixel(dst, x, y, color)
        return
    xa, xb = stroke_span(x, thickness)
    ya, yb = stroke_span(y, thickness)
    fill_rect(dst, xa, ya, xb, yb, color)
