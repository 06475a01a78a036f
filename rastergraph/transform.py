from __future__ import annotations

import math

import numpy as np

from rastergraph.style import Window


def coordinate_to_pixel(
    x: float,
    y: float,
    window: Window,
    width: int,
    height: int,
    *,
    flip_y: bool = False,
) -> tuple[int, int]:
    """Map a logical coordinate onto the canvas.

    ``(x_min, y_min)`` lands on pixel ``(0, 0)`` and ``(x_max, y_max)`` on
    ``(width, height)``. Logical +y grows toward pixel +y unless ``flip_y``.
    """
    px = math.floor((x - window.x_min) * width / window.x_range)
    py = math.floor((y - window.y_min) * height / window.y_range)
    if flip_y:
        py = height - py
    return px, py


def coordinates_to_pixels(
    xs: np.ndarray,
    ys: np.ndarray,
    window: Window,
    width: int,
    height: int,
    *,
    flip_y: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    px = np.floor((xs - window.x_min) * width / window.x_range).astype(np.int64)
    py = np.floor((ys - window.y_min) * height / window.y_range).astype(np.int64)
    if flip_y:
        py = height - py
    return px, py


def pixel_to_coordinate(
    px: float,
    py: float,
    window: Window,
    width: int,
    height: int,
    *,
    flip_y: bool = False,
) -> tuple[float, float]:
    if flip_y:
        py = height - py
    x = window.x_min + px * window.x_range / width
    y = window.y_min + py * window.y_range / height
    return x, y


def grid_step(extent: int, spacing: float) -> int:
    return int(extent * spacing)


def gridline_positions(extent: int, spacing: float) -> list[int]:
    """Interior gridline offsets; nothing is placed on either canvas edge."""
    step = grid_step(extent, spacing)
    if step <= 0:
        return []
    return list(range(step, extent, step))


def resolve_stroke(explicit: float | None, relative: float, width: int) -> float:
    if explicit is not None:
        return float(explicit)
    return width * relative


def stroke_span(center: float, thickness: float) -> tuple[int, int]:
    """First and last pixel index covered by a stroke of ``thickness`` centered on ``center``."""
    count = max(1, int(math.floor(thickness + 0.5)))
    start = int(math.floor(center - count / 2.0 + 0.5))
    return start, start + count - 1


def sample_range(
    range_low: float,
    range_high: float,
    step: float,
    *,
    clip_low: float | None = None,
    clip_high: float | None = None,
) -> np.ndarray:
    """Inclusive samples ``range_low + k * step`` up to ``range_high``.

    ``clip_low``/``clip_high`` restrict ``k`` to the indices whose sample can
    land inside that interval; the sample grid itself stays anchored at
    ``range_low``.
    """
    if step <= 0 or not math.isfinite(step):
        raise ValueError("step must be a finite value > 0")
    if not (math.isfinite(range_low) and math.isfinite(range_high)):
        raise ValueError("range ends must be finite")
    if range_high < range_low:
        return np.empty(0, dtype=np.float64)
    first = 0
    if clip_low is not None and clip_low > range_low:
        first = int(math.ceil((clip_low - range_low) / step - 1e-9))
    upper = range_high if clip_high is None else min(range_high, clip_high)
    if upper < range_low:
        return np.empty(0, dtype=np.float64)
    last = int(math.floor((upper - range_low) / step + 1e-9))
    if last < first:
        return np.empty(0, dtype=np.float64)
    samples = range_low + step * np.arange(first, last + 1, dtype=np.float64)
    return samples[samples <= range_high + step * 1e-9]
