from __future__ import annotations

import numpy as np

from rastergraph.style import RGBA


def draw_markers(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, diameter: int = 1) -> None:
    for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
        _fill_disc(dst, int(x), int(y), diameter, color)


def _fill_disc(dst: np.ndarray, cx: int, cy: int, diameter: int, color: RGBA) -> None:
    """Fill a disc of ``diameter`` pixels centered on ``(cx, cy)``, clipped to the canvas."""
    if diameter <= 0:
        return
    lo = -(diameter // 2)
    hi = lo + diameter - 1
    x0 = max(0, cx + lo)
    x1 = min(dst.shape[1] - 1, cx + hi)
    y0 = max(0, cy + lo)
    y1 = min(dst.shape[0] - 1, cy + hi)
    if x0 > x1 or y0 > y1:
        return

    # Pixel centers relative to the disc center; even diameters center between pixels.
    offset = (diameter - 1) / 2.0 + lo
    yy, xx = np.mgrid[y0 : y1 + 1, x0 : x1 + 1]
    dx = xx - cx - offset
    dy = yy - cy - offset
    radius = diameter / 2.0
    mask = dx * dx + dy * dy <= radius * radius
    if not np.any(mask):
        return

    region = dst[y0 : y1 + 1, x0 : x1 + 1]
    a = color[3] / 255.0
    src = np.asarray(color[:3], dtype=np.float32)
    current = region[mask][:, :3].astype(np.float32)
    blended = (src * a + current * (1.0 - a)).astype(np.uint8)
    pixels = region[mask]
    pixels[:, :3] = blended
    if region.shape[2] == 4:
        pixels[:, 3] = 255
    region[mask] = pixels
