"""Standard normal helpers."""

from __future__ import annotations

import math
from statistics import NormalDist
from typing import Any

from wilson_ci.models.errors import InvalidArgument

_STANDARD_NORMAL = NormalDist()


def _check_unit(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a real number, got {value!r}")
    if not 0.0 < value < 1.0:
        raise InvalidArgument(f"{name} must lie strictly between 0 and 1, got {value!r}")
    return float(value)


def probit(p: float) -> float:
    """Standard normal quantile.

    Args:
        p: Cumulative probability in the open interval `(0, 1)`.

    Returns:
        float: Value below which `p` of the standard normal mass lies.
    """

    return _STANDARD_NORMAL.inv_cdf(_check_unit("probability", p))


def critical_value(confidence_level: float) -> float:
    """Two-tailed critical value for a confidence level (1.959964 at 0.95).

    Evaluated from the lower tail, since `0.5 * (1 + c)` rounds to 1.0 for
    levels within an ulp of 1.
    """

    confidence_level = _check_unit("confidence_level", confidence_level)
    return -probit(0.5 * (1.0 - confidence_level))


def pdf(x: float) -> float:
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def cdf(x: float) -> float:
    return _STANDARD_NORMAL.cdf(x)
