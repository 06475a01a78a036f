from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
import logging
import math
from typing import Any, TypeVar

import numpy as np

from rastergraph.adapters import normalize_points, open_surface, surface_size
from rastergraph.errors import ConfigurationError
from rastergraph.raster import draw_line, draw_markers, draw_text, fill, text_size
from rastergraph.style import GraphStyle, Window, coerce_color
from rastergraph.ticks import format_ticks
from rastergraph.transform import (
    coordinates_to_pixels,
    gridline_positions,
    grid_step,
    pixel_to_coordinate,
    resolve_stroke,
    sample_range,
)


LOGGER = logging.getLogger(__name__)

RealFunction = Callable[[float], float]
ImageT = TypeVar("ImageT")

TICK_LABEL_GAP_PX = 2


def identity(x: float) -> float:
    return x


class GraphRenderer:
    """Draws a Cartesian grid and plots points or functions onto raster images.

    Canvas dimensions are taken from the image on every call and passed down
    explicitly; the renderer itself holds configuration only.
    Instances are not thread-safe: callers sharing one renderer across threads
    must serialize render calls and configuration changes themselves.
    """

    def __init__(
        self,
        window: Window | None = None,
        style: GraphStyle | None = None,
        function: RealFunction | None = None,
    ) -> None:
        self.window = window if window is not None else Window()
        self.style = style if style is not None else GraphStyle()
        self.function: RealFunction = function if function is not None else identity

    def set_window(
        self,
        *,
        x_min: float | None = None,
        x_max: float | None = None,
        y_min: float | None = None,
        y_max: float | None = None,
    ) -> "GraphRenderer":
        changes = {
            key: float(value)
            for key, value in (("x_min", x_min), ("x_max", x_max), ("y_min", y_min), ("y_max", y_max))
            if value is not None
        }
        self.window = replace(self.window, **changes)
        return self

    def set_gridlines(
        self,
        *,
        enabled: bool | None = None,
        spacing: float | None = None,
        thickness: float | None = None,
        color: Any = None,
        stroke: float | None = None,
    ) -> "GraphRenderer":
        return self._update_style(
            draw_gridlines=enabled,
            grid_spacing=spacing,
            grid_thickness=thickness,
            grid_color=None if color is None else coerce_color(color),
            grid_stroke=stroke,
        )

    def set_ticks(
        self,
        *,
        enabled: bool | None = None,
        length: float | None = None,
        stroke: float | None = None,
        labeled: bool | None = None,
        label_color: Any = None,
        label_font_px: float | None = None,
    ) -> "GraphRenderer":
        return self._update_style(
            draw_ticks=enabled,
            tick_length=length,
            tick_stroke=stroke,
            label_ticks=labeled,
            tick_label_color=None if label_color is None else coerce_color(label_color),
            tick_label_font_px=label_font_px,
        )

    def set_axis(self, *, width: float | None = None, color: Any = None, stroke: float | None = None) -> "GraphRenderer":
        return self._update_style(
            axis_width=width,
            axis_color=None if color is None else coerce_color(color),
            axis_stroke=stroke,
        )

    def set_plot_style(
        self,
        *,
        width: float | None = None,
        color: Any = None,
        stroke: float | None = None,
        flip_y: bool | None = None,
    ) -> "GraphRenderer":
        return self._update_style(
            plot_width=width,
            plot_color=None if color is None else coerce_color(color),
            plot_stroke=stroke,
            flip_y=flip_y,
        )

    def set_background(self, color: Any) -> "GraphRenderer":
        return self._update_style(background_color=coerce_color(color))

    def set_function(self, function: RealFunction) -> "GraphRenderer":
        if not callable(function):
            raise ConfigurationError("function must be callable")
        self.function = function
        return self

    def clear_overrides(self) -> "GraphRenderer":
        """Drop every explicit stroke so all sizes follow the relative settings again."""
        self.style = replace(self.style, grid_stroke=None, tick_stroke=None, axis_stroke=None, plot_stroke=None)
        return self

    def calculate(self, x: float) -> float:
        return float(self.function(x))

    def validate(self, width: int, height: int) -> None:
        self.window.validate()
        if height <= 0:
            raise ConfigurationError("height cannot be less than or equal to zero")
        if width <= 0:
            raise ConfigurationError("width cannot be less than or equal to zero")
        self.style.validate()

    def render_grid(self, image: ImageT) -> ImageT:
        with open_surface(image) as pixels:
            width, height = surface_size(pixels)
            self.validate(width, height)
            LOGGER.debug("rendering grid; width=%d height=%d", width, height)
            self._draw_background(pixels)
            if self.style.draw_gridlines:
                self._draw_gridlines(pixels, width, height)
            self._draw_axis(pixels, width, height)
            if self.style.draw_ticks:
                self._draw_ticks(pixels, width, height)
            if self.style.label_ticks:
                self._draw_tick_labels(pixels, width, height)
        return image

    def render_points(self, image: ImageT, xs: Any, ys: Any) -> ImageT:
        with open_surface(image) as pixels:
            width, height = surface_size(pixels)
            self.validate(width, height)
            x_arr, y_arr = normalize_points(xs, ys)
            self._plot(pixels, x_arr, y_arr, width, height)
        return image

    def render_graph(self, image: ImageT, xs: Any, ys: Any) -> ImageT:
        """Like ``render_points`` but fills the background first, for blank canvases."""
        with open_surface(image) as pixels:
            width, height = surface_size(pixels)
            self.validate(width, height)
            x_arr, y_arr = normalize_points(xs, ys)
            self._draw_background(pixels)
            self._plot(pixels, x_arr, y_arr, width, height)
        return image

    def render_function(
        self,
        image: ImageT,
        f: RealFunction | None = None,
        range_low: float | None = None,
        range_high: float | None = None,
    ) -> ImageT:
        """Sample ``f`` once per pixel column's worth of x and plot each sample.

        ``f`` defaults to the configured function and the range to the window's
        x bounds. Both range ends are inclusive, and only samples that can land
        inside the window are evaluated.
        """
        with open_surface(image) as pixels:
            width, height = surface_size(pixels)
            self.validate(width, height)
            x_arr, y_arr = self._sample(f, range_low, range_high, width)
            self._plot(pixels, x_arr, y_arr, width, height)
        return image

    def render_function_graph(
        self,
        image: ImageT,
        f: RealFunction | None = None,
        range_low: float | None = None,
        range_high: float | None = None,
    ) -> ImageT:
        with open_surface(image) as pixels:
            width, height = surface_size(pixels)
            self.validate(width, height)
            x_arr, y_arr = self._sample(f, range_low, range_high, width)
            self._draw_background(pixels)
            self._plot(pixels, x_arr, y_arr, width, height)
        return image

    def marker_diameter(self, width: int) -> int:
        if self.style.plot_stroke is not None:
            return max(1, int(round(self.style.plot_stroke)))
        return max(1, int(width * self.style.plot_width))

    def _update_style(self, **changes: Any) -> "GraphRenderer":
        self.style = replace(self.style, **{key: value for key, value in changes.items() if value is not None})
        return self

    def _sample(
        self,
        f: RealFunction | None,
        range_low: float | None,
        range_high: float | None,
        width: int,
    ) -> tuple[np.ndarray, np.ndarray]:
        func = f if f is not None else self.function
        low = self.window.x_min if range_low is None else float(range_low)
        high = self.window.x_max if range_high is None else float(range_high)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise ConfigurationError(f"function range must be finite; got [{low}, {high}]")
        if high < low:
            LOGGER.warning("function range is empty; range_low=%s range_high=%s", low, high)
        step = self.window.x_range / width
        # Samples left or right of the window would be clipped anyway.
        xs = sample_range(low, high, step, clip_low=self.window.x_min, clip_high=self.window.x_max)
        LOGGER.debug("sampling function; samples=%d step=%.6g", xs.size, step)
        ys = np.asarray([float(func(float(x))) for x in xs.tolist()], dtype=np.float64)
        return xs, ys

    def _draw_background(self, pixels: np.ndarray) -> None:
        fill(pixels, self.style.background_color)

    def _draw_gridlines(self, pixels: np.ndarray, width: int, height: int) -> None:
        style = self.style
        thickness = resolve_stroke(style.grid_stroke, style.grid_thickness, width)
        xs = gridline_positions(width, style.grid_spacing)
        ys = gridline_positions(height, style.grid_spacing)
        for x in xs:
            draw_line(pixels, x, 0, x, height, style.grid_color, thickness)
        for y in ys:
            draw_line(pixels, 0, y, width, y, style.grid_color, thickness)
        LOGGER.debug("drew gridlines; vertical=%d horizontal=%d thickness=%.2f", len(xs), len(ys), thickness)

    def _draw_axis(self, pixels: np.ndarray, width: int, height: int) -> None:
        style = self.style
        thickness = resolve_stroke(style.axis_stroke, style.axis_width, width)
        draw_line(pixels, width // 2, 0, width // 2, height, style.axis_color, thickness)
        draw_line(pixels, 0, height // 2, width, height // 2, style.axis_color, thickness)

    def _draw_ticks(self, pixels: np.ndarray, width: int, height: int) -> None:
        style = self.style
        thickness = resolve_stroke(style.tick_stroke, style.grid_thickness, width)
        half = int(width * style.tick_length) // 2
        cx = width // 2
        cy = height // 2
        for y in gridline_positions(height, style.grid_spacing):
            draw_line(pixels, cx - half, y, cx + half, y, style.axis_color, thickness)
        for x in gridline_positions(width, style.grid_spacing):
            draw_line(pixels, x, cy - half, x, cy + half, style.axis_color, thickness)

    def _draw_tick_labels(self, pixels: np.ndarray, width: int, height: int) -> None:
        style = self.style
        window = self.window
        half = int(width * style.tick_length) // 2 if style.draw_ticks else 0
        cx = width // 2
        cy = height // 2
        font_px = style.tick_label_font_px

        x_positions = gridline_positions(width, style.grid_spacing)
        x_values = [pixel_to_coordinate(x, 0, window, width, height)[0] for x in x_positions]
        x_step = grid_step(width, style.grid_spacing) * window.x_range / width
        for x, label in zip(x_positions, format_ticks(x_values, x_step), strict=True):
            if x == cx:
                continue
            tw, _ = text_size(label, font_size_px=font_px)
            draw_text(pixels, x - tw // 2, cy + half + TICK_LABEL_GAP_PX, label, style.tick_label_color, font_size_px=font_px)

        y_positions = gridline_positions(height, style.grid_spacing)
        y_values = [pixel_to_coordinate(0, y, window, width, height, flip_y=style.flip_y)[1] for y in y_positions]
        y_step = grid_step(height, style.grid_spacing) * window.y_range / height
        for y, label in zip(y_positions, format_ticks(y_values, y_step), strict=True):
            if y == cy:
                continue
            _, th = text_size(label, font_size_px=font_px)
            draw_text(pixels, cx + half + TICK_LABEL_GAP_PX, y - th // 2, label, style.tick_label_color, font_size_px=font_px)

    def _plot(self, pixels: np.ndarray, xs: np.ndarray, ys: np.ndarray, width: int, height: int) -> None:
        window = self.window
        visible = (
            np.isfinite(xs)
            & np.isfinite(ys)
            & (xs >= window.x_min)
            & (xs <= window.x_max)
            & (ys >= window.y_min)
            & (ys <= window.y_max)
        )
        skipped = int(xs.size - np.count_nonzero(visible))
        if skipped:
            LOGGER.debug("skipped %d point(s) outside the window", skipped)
        if not np.any(visible):
            return
        px, py = coordinates_to_pixels(xs[visible], ys[visible], window, width, height, flip_y=self.style.flip_y)
        draw_markers(pixels, px, py, self.style.plot_color, diameter=self.marker_diameter(width))
