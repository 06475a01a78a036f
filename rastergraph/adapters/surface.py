from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging
from typing import Any

import numpy as np
from PIL import Image
import torch

from rastergraph.errors import ConfigurationError


LOGGER = logging.getLogger(__name__)


@contextmanager
def open_surface(image: Any) -> Iterator[np.ndarray]:
    """Yield a writable ``(H, W, C)`` uint8 view of ``image``.

    numpy arrays and CPU torch tensors are drawn on in place. Pillow images are
    drawn on a staging array that is pasted back only if the block completes.
    """
    if isinstance(image, np.ndarray):
        yield _check_pixels(image, "image array")
        return

    if isinstance(image, torch.Tensor):
        if image.device.type != "cpu":
            raise ConfigurationError("torch image must live on the CPU")
        if image.dtype != torch.uint8:
            raise ConfigurationError("torch image must be uint8")
        yield _check_pixels(image.numpy(), "torch image")
        return

    if isinstance(image, Image.Image):
        if image.mode not in {"RGB", "RGBA"}:
            raise ConfigurationError(f"unsupported Pillow image mode: {image.mode}")
        staged = np.array(image, dtype=np.uint8)
        LOGGER.debug("drawing Pillow image through staging array; size=%s mode=%s", image.size, image.mode)
        yield staged
        image.paste(Image.fromarray(staged))
        return

    raise ConfigurationError(f"unsupported image type: {type(image)!r}")


def surface_size(pixels: np.ndarray) -> tuple[int, int]:
    return int(pixels.shape[1]), int(pixels.shape[0])


def _check_pixels(pixels: np.ndarray, label: str) -> np.ndarray:
    if pixels.dtype != np.uint8:
        raise ConfigurationError(f"{label} must be uint8")
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ConfigurationError(f"{label} must have shape (H, W, 3) or (H, W, 4)")
    if not pixels.flags.writeable:
        raise ConfigurationError(f"{label} is read-only")
    return pixels
