from __future__ import annotations

import math
from collections.abc import Callable

from rastergraph.errors import ConfigurationError


FUNCTIONS: dict[str, Callable[[float], float]] = {
    "identity": lambda x: x,
    "square": lambda x: x * x,
    "cube": lambda x: x * x * x,
    "abs": abs,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "exp": math.exp,
    # Out-of-domain samples become NaN and are skipped when plotted.
    "sqrt": lambda x: math.sqrt(x) if x >= 0 else math.nan,
}


def resolve_function(name: str) -> Callable[[float], float]:
    try:
        return FUNCTIONS[name]
    except KeyError as exc:
        known = ", ".join(sorted(FUNCTIONS))
        raise ConfigurationError(f"unknown function `{name}`; expected one of: {known}") from exc
