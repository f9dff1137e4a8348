"""Text report helpers for interval results."""

from __future__ import annotations

from typing import Iterable

from wilson_ci.models.errors import InvalidArgument
from wilson_ci.models.wilson import WilsonResult, compute_wilson_interval


def confidence_label(confidence_level: float) -> str:
    """Render a confidence level as a percentage, e.g. `95%`."""

    return f"{round(confidence_level * 100.0, 6):g}%"


def format_result(result: WilsonResult, precision: int = 6) -> str:
    """Build a one-line summary of an interval.

    Example:
        "73/76 p=0.960526 95% CI [0.890252, 0.986485]"
    """

    p = precision
    return (
        f"{result.successes}/{result.trials} p={result.proportion:.{p}f} "
        f"{confidence_label(result.confidence_level)} CI "
        f"[{result.lower_bound:.{p}f}, {result.upper_bound:.{p}f}]"
    )


def scale_sweep(
    successes: int,
    trials: int,
    factors: Iterable[int],
    confidence_level: float = 0.95,
) -> list[WilsonResult]:
    """Evaluate the interval at scaled counts with the proportion held fixed.

    Args:
        successes: Base successes.
        trials: Base trials.
        factors: Positive integer multipliers applied to both counts.
        confidence_level: Two-sided confidence level.

    Returns:
        list[WilsonResult]: One result per factor, in input order.
    """

    results = []
    for factor in factors:
        if isinstance(factor, bool) or not isinstance(factor, int) or factor <= 0:
            raise InvalidArgument(f"scale factors must be positive integers, got {factor!r}")
        results.append(compute_wilson_interval(successes * factor, trials * factor, confidence_level))
    return results


def sweep_table(results: list[WilsonResult], precision: int = 6) -> str:
    """Render sweep results as a fixed-width table.

    The first row is treated as the base count; the scale column is each
    row's trial count relative to it.
    """

    header = f"{'scale':>6} {'successes':>10} {'trials':>10} {'lower':>12} {'upper':>12} {'width':>12}"
    if not results:
        return header
    base_trials = results[0].trials
    lines = [header]
    for row in results:
        scale = row.trials / base_trials
        lines.append(
            f"{scale:>6g} {row.successes:>10d} {row.trials:>10d} "
            f"{row.lower_bound:>12.{precision}f} {row.upper_bound:>12.{precision}f} {row.width:>12.{precision}f}"
        )
    return "\n".join(lines)
