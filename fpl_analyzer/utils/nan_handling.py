"""NaN/Inf scrubbing and lenient numeric parsing for upstream payloads."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import numpy as np

_TENTH = Decimal("0.1")


def scrub_nan(obj: Any) -> Any:
    """Recursively replace NaN/Inf with None and unwrap numpy scalars."""
    if isinstance(obj, (np.floating, np.integer)):
        obj = obj.item()
    if isinstance(obj, float):
        return None if (math.isnan(obj) or math.isinf(obj)) else obj
    if isinstance(obj, dict):
        return {k: scrub_nan(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [scrub_nan(v) for v in obj]
    return obj


def safe_float(value: Any, default: float = 0.0) -> float:
    """Convert value to float, returning default for NaN/None/inf."""
    if value is None:
        return default
    try:
        f = float(value)
        return default if (math.isnan(f) or math.isinf(f)) else f
    except (TypeError, ValueError):
        return default


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round ties toward +inf, like JS ``Math.round`` (1.25 -> 1.3, -2.5 -> -2)."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def fmt1(value: float) -> str:
    """Format with one decimal, ties away from zero like JS ``toFixed(1)``.

    The exact binary value is rounded, so 4.25 -> "4.3" and 0.15 -> "0.1".
    """
    rounded = Decimal(float(value)).quantize(_TENTH, rounding=ROUND_HALF_UP)
    return f"{float(rounded) + 0.0:.1f}"
