"""Wilson score interval for a binomial proportion."""

from __future__ import annotations

import math
import sys
from dataclasses import asdict, dataclass
from typing import Any

from wilson_ci.models.errors import InvalidArgument
from wilson_ci.models.normal import critical_value


@dataclass(frozen=True)
class WilsonResult:
    """Interval estimate for one observed count.

    Args:
        successes: Observed successes.
        trials: Number of trials.
        confidence_level: Two-sided confidence level.
        proportion: Point estimate `successes / trials`.
        lower_bound: Lower interval bound.
        upper_bound: Upper interval bound.
    """

    successes: int
    trials: int
    confidence_level: float
    proportion: float
    lower_bound: float
    upper_bound: float

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def _check_count(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    return value


def compute_wilson_interval(successes: int, trials: int, confidence_level: float = 0.95) -> WilsonResult:
    """Compute the Wilson score interval.

    The interval is evaluated with numerator and denominator scaled by the
    trial count before the square root is taken, which keeps round-off small
    near `successes == 0` and `successes == trials`.

    Args:
        successes: Observed successes, `0 <= successes <= trials`.
        trials: Number of trials, positive.
        confidence_level: Two-sided confidence level in `(0, 1)`.

    Returns:
        WilsonResult: Proportion and interval bounds.

    Raises:
        InvalidArgument: If any precondition is violated, or trials exceeds
            the largest finite float.
    """

    successes = _check_count("successes", successes)
    trials = _check_count("trials", trials)
    if trials <= 0:
        raise InvalidArgument(f"trials must be positive, got {trials}")
    if successes < 0 or successes > trials:
        raise InvalidArgument(f"successes must be between 0 and trials ({trials}), got {successes}")
    if trials > sys.float_info.max:
        raise InvalidArgument("trials is too large to represent as a float")

    lam = critical_value(confidence_level)
    nt = lam * lam
    center = successes + nt / 2.0
    # Divided through by trials before multiplying so large counts stay finite.
    radical = (successes * ((trials - successes) / trials) + nt / 4.0) * nt
    delta = math.sqrt(radical)
    denom = trials + nt
    proportion = successes / trials

    # Rounding can leave a bound a few ulps outside [0, p] or [p, 1].
    lower = min(max((center - delta) / denom, 0.0), proportion)
    upper = max(min((center + delta) / denom, 1.0), proportion)

    return WilsonResult(
        successes=successes,
        trials=trials,
        confidence_level=float(confidence_level),
        proportion=proportion,
        lower_bound=lower,
        upper_bound=upper,
    )
