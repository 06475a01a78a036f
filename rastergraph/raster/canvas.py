from __future__ import annotations

import numpy as np

from rastergraph.style import RGBA


def new_canvas(width: int, height: int, color: RGBA = (255, 255, 255, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def fill(dst: np.ndarray, color: RGBA) -> None:
    """Overwrite every pixel; unlike the line primitives this does not blend."""
    dst[:, :] = np.asarray(color[: dst.shape[2]], dtype=np.uint8)


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x : x + 1], color)


def fill_rect(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
    """Blend ``color`` over the inclusive rectangle, clipped to the canvas."""
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if xa > xb or ya > yb:
        return
    _blend(dst[ya : yb + 1, xa : xb + 1], color)


def _blend(region: np.ndarray, color: RGBA) -> None:
    a = color[3] / 255.0
    if a >= 1.0:
        region[:, :, :3] = np.asarray(color[:3], dtype=np.uint8)
    else:
        inv = 1.0 - a
        src = np.asarray(color[:3], dtype=np.float32) * a
        region[:, :, :3] = (src + region[:, :, :3].astype(np.float32) * inv).astype(np.uint8)
    if region.shape[2] == 4:
        region[:, :, 3] = 255
