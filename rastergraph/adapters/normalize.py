from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np
import torch

from rastergraph.errors import ConfigurationError, ShapeMismatchError


def normalize_points(xs: Any, ys: Any) -> tuple[np.ndarray, np.ndarray]:
    """Coerce a point set into two float64 arrays of equal length.

    Non-finite entries are kept; callers skip them like out-of-window points.
    """
    x_arr = _coerce_1d_numeric(xs, label="x")
    y_arr = _coerce_1d_numeric(ys, label="y")
    if x_arr.shape != y_arr.shape:
        raise ShapeMismatchError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    return x_arr, y_arr


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ConfigurationError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ConfigurationError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        arr = np.asarray(value, dtype=object)
        if arr.ndim != 1:
            raise ConfigurationError(f"{label} must be 1-D")
        return _coerce_ndarray(arr, label=label)

    raise ConfigurationError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
