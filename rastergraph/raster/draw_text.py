from __future__ import annotations

from functools import lru_cache
import logging

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from rastergraph.style import RGBA


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_SIZE_PX = 10.0
# Looked up by Pillow in the platform font directories, first hit wins.
FONT_FILES = ("DejaVuSansMono.ttf", "DejaVuSans.ttf", "Menlo.ttc", "cour.ttf")


def draw_text(dst: np.ndarray, x: int, y: int, text: str, color: RGBA, *, font_size_px: float = DEFAULT_FONT_SIZE_PX) -> None:
    """Blend ``text`` onto ``dst`` with its ink box's top-left corner at ``(x, y)``."""
    if not text:
        return
    _blend_coverage(dst, x, y, _text_mask(text, font_size_px), color)


def text_size(text: str, *, font_size_px: float = DEFAULT_FONT_SIZE_PX) -> tuple[int, int]:
    if not text:
        return (0, 1)
    height, width = _text_mask(text, font_size_px).shape
    return (width, height)


def _blend_coverage(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    rows = slice(max(0, y), min(dst.shape[0], y + mask.shape[0]))
    cols = slice(max(0, x), min(dst.shape[1], x + mask.shape[1]))
    if rows.start >= rows.stop or cols.start >= cols.stop:
        return
    coverage = mask[rows.start - y : rows.stop - y, cols.start - x : cols.stop - x]
    alpha = coverage.astype(np.float32)[:, :, None] * (color[3] / (255.0 * 255.0))
    target = dst[rows, cols, :3]
    ink = np.asarray(color[:3], dtype=np.float32)
    target[...] = np.rint(target + (ink - target) * alpha).astype(np.uint8)


@lru_cache(maxsize=256)
def _text_mask(text: str, font_size_px: float) -> np.ndarray:
    """8-bit coverage of ``text`` cropped to its ink bounding box."""
    font = _font(max(1, int(round(font_size_px))))
    left, top, right, bottom = font.getbbox(text)
    canvas = Image.new("L", (max(1, int(right - left)), max(1, int(bottom - top))), 0)
    ImageDraw.Draw(canvas).text((-left, -top), text, fill=255, font=font)
    mask = np.asarray(canvas, dtype=np.uint8)
    mask.flags.writeable = False
    return mask


@lru_cache(maxsize=32)
def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for name in FONT_FILES:
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    LOGGER.debug("no system font from %s found; using Pillow's default at %dpx", FONT_FILES, size)
    return ImageFont.load_default(size=size)
