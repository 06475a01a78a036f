from __future__ import annotations

from dataclasses import dataclass, fields
import math
import numbers
from pathlib import Path
import tomllib
from typing import Any

from rastergraph.errors import ConfigurationError


RGBA = tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
BLUE: RGBA = (0, 0, 255, 255)
RED: RGBA = (255, 0, 0, 255)
GREEN: RGBA = (0, 255, 0, 255)
GRAY: RGBA = (128, 128, 128, 255)

NAMED_COLORS: dict[str, RGBA] = {
    "white": WHITE,
    "black": BLACK,
    "blue": BLUE,
    "red": RED,
    "green": GREEN,
    "gray": GRAY,
    "grey": GRAY,
}

RELATIVE_FIELDS = ("grid_spacing", "grid_thickness", "tick_length", "axis_width", "plot_width")
STROKE_FIELDS = ("grid_stroke", "tick_stroke", "axis_stroke", "plot_stroke")
COLOR_FIELDS = ("background_color", "grid_color", "axis_color", "plot_color", "tick_label_color")
TOGGLE_FIELDS = ("draw_gridlines", "draw_ticks", "label_ticks", "flip_y")


@dataclass(frozen=True)
class Window:
    x_min: float = -10.0
    x_max: float = 10.0
    y_min: float = -10.0
    y_max: float = 10.0

    @property
    def x_range(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_range(self) -> float:
        return self.y_max - self.y_min

    def validate(self) -> None:
        for name in ("x_min", "x_max", "y_min", "y_max"):
            if not math.isfinite(_require_number(name, getattr(self, name))):
                raise ConfigurationError(f"{name} must be finite")
        if self.x_max <= self.x_min:
            raise ConfigurationError("x_max cannot be less than or equal to x_min")
        if self.y_max <= self.y_min:
            raise ConfigurationError("y_max cannot be less than or equal to y_min")


@dataclass(frozen=True)
class GraphStyle:
    """Visual settings for a graph.

    Relative sizes are fractions of the canvas width and must lie in [0, 1].
    Each ``*_stroke`` field, when set, is an explicit pixel width that
    overrides the matching relative size.
    """

    draw_gridlines: bool = True
    grid_spacing: float = 0.10
    grid_thickness: float = 0.01
    grid_color: RGBA = BLUE
    grid_stroke: float | None = None

    draw_ticks: bool = True
    tick_length: float = 0.10
    tick_stroke: float | None = None
    label_ticks: bool = False
    tick_label_color: RGBA = BLACK
    tick_label_font_px: float = 10.0

    background_color: RGBA = WHITE

    axis_color: RGBA = BLACK
    axis_width: float = 0.02
    axis_stroke: float | None = None

    plot_width: float = 0.01
    plot_color: RGBA = BLUE
    plot_stroke: float | None = None

    flip_y: bool = False

    def validate(self) -> None:
        for name in TOGGLE_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise ConfigurationError(f"{name} must be true or false")
        for name in RELATIVE_FIELDS:
            value = _require_number(name, getattr(self, name))
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(f"{name} must be a finite value >= 0")
            if value > 1:
                raise ConfigurationError(f"{name} cannot be greater than one")
        for name in STROKE_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            value = _require_number(name, value)
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be > 0 when set")
        font_px = _require_number("tick_label_font_px", self.tick_label_font_px)
        if not math.isfinite(font_px) or font_px <= 0:
            raise ConfigurationError("tick_label_font_px must be > 0")

    @classmethod
    def from_mapping(cls, raw: dict[str, Any]) -> "GraphStyle":
        """Build a validated style from a config table, coercing colors and numbers."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ConfigurationError(f"unknown style field(s): {', '.join(unknown)}")
        values: dict[str, Any] = {}
        for key, value in raw.items():
            if key in COLOR_FIELDS:
                values[key] = coerce_color(value)
            elif key in TOGGLE_FIELDS:
                values[key] = value
            else:
                values[key] = float(_require_number(key, value))
        style = cls(**values)
        style.validate()
        return style


def _require_number(name: str, value: Any) -> float:
    # bool is an int subclass; a stray `true` must not read as 1.0.
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    return value


def coerce_color(color: Any) -> RGBA:
    if isinstance(color, str):
        text = color.strip().lower()
        if text in NAMED_COLORS:
            return NAMED_COLORS[text]
        if text.startswith("#") and len(text) in (7, 9):
            try:
                channels = [int(text[i : i + 2], 16) for i in range(1, len(text), 2)]
            except ValueError as exc:
                raise ConfigurationError(f"invalid hex color: {color!r}") from exc
            if len(channels) == 3:
                channels.append(255)
            return (channels[0], channels[1], channels[2], channels[3])
        raise ConfigurationError(f"unknown color: {color!r}")

    if isinstance(color, (tuple, list)) and len(color) in (3, 4):
        out = []
        for channel in color:
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ConfigurationError(f"color channels must be ints in [0, 255]: {color!r}")
            out.append(channel)
        if len(out) == 3:
            out.append(255)
        return (out[0], out[1], out[2], out[3])

    raise ConfigurationError(f"unsupported color value: {color!r}")


def load_config(path: str | Path) -> tuple[Window, GraphStyle]:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"config file not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"invalid TOML in {config_path}: {exc}") from exc

    unknown = sorted(set(raw) - {"window", "style"})
    if unknown:
        raise ConfigurationError(f"unknown config table(s): {', '.join(unknown)}")

    window_raw = _require_table(raw.get("window", {}), "window")
    known_window = {f.name for f in fields(Window)}
    bad = sorted(set(window_raw) - known_window)
    if bad:
        raise ConfigurationError(f"unknown window field(s): {', '.join(bad)}")
    try:
        window = Window(**{key: float(value) for key, value in window_raw.items()})
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"window bounds must be numbers: {exc}") from exc

    style = GraphStyle.from_mapping(_require_table(raw.get("style", {}), "style"))
    return window, style


def _require_table(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigurationError(f"[{name}] must be a table")
    return value
