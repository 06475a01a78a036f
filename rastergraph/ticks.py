from __future__ import annotations

import math


MAX_DECIMALS = 9


def format_tick(value: float, step: float) -> str:
    """Label for a gridline at ``value`` when gridlines are ``step`` apart.

    Shows as many decimals as the step needs and no more, so a step of 0.5
    gives ``-1.5``, ``-1``, ``-0.5``.
    """
    if not math.isfinite(value):
        return str(value)
    if math.isfinite(step) and abs(value) <= abs(step) * 1e-9:
        value = 0.0
    text = f"{value:.{_decimals_from_step(step)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_ticks(values: list[float], step: float) -> list[str]:
    return [format_tick(v, step) for v in values]


def _decimals_from_step(step: float) -> int:
    if not math.isfinite(step) or step <= 0:
        return MAX_DECIMALS
    # Tolerance absorbs float noise such as 0.30000000000000004.
    for decimals in range(MAX_DECIMALS):
        if abs(round(step, decimals) - step) <= step * 1e-9:
            return decimals
    return MAX_DECIMALS
