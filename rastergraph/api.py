from __future__ import annotations

from pathlib import Path

import numpy as np

from rastergraph.raster import new_canvas
from rastergraph.renderer import GraphRenderer, RealFunction
from rastergraph.style import RGBA, WHITE, GraphStyle, Window, load_config


def grapher(
    *,
    window: Window | None = None,
    style: GraphStyle | None = None,
    function: RealFunction | None = None,
    config: str | Path | None = None,
) -> GraphRenderer:
    """Build a renderer, optionally seeded from a TOML config file.

    Explicit ``window``/``style`` arguments win over the file's tables.
    """
    if config is not None:
        file_window, file_style = load_config(config)
        window = window if window is not None else file_window
        style = style if style is not None else file_style
    return GraphRenderer(window=window, style=style, function=function)


def blank_image(width: int, height: int, color: RGBA = WHITE) -> np.ndarray:
    if width < 0 or height < 0:
        raise ValueError("width and height must be >= 0")
    return new_canvas(width, height, color=color)
