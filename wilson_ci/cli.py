"""CLI entrypoint for the Wilson interval calculator."""

from __future__ import annotations

import json
import logging

import click

from wilson_ci.config import settings
from wilson_ci.models.errors import InvalidArgument
from wilson_ci.models.normal import cdf, critical_value, pdf
from wilson_ci.models.wilson import compute_wilson_interval
from wilson_ci.report.formatting import format_result, scale_sweep, sweep_table

logging.basicConfig(level=settings.log_level)
LOGGER = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Wilson score interval CLI."""


@cli.command("interval")
@click.argument("successes", type=int)
@click.argument("trials", type=int)
@click.option("--confidence", default=settings.confidence_level, type=float, show_default=True)
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON instead of text")
def interval_cmd(successes: int, trials: int, confidence: float, as_json: bool) -> None:
    """Compute the interval for SUCCESSES out of TRIALS."""

    try:
        result = compute_wilson_interval(successes, trials, confidence)
    except InvalidArgument as exc:
        raise click.UsageError(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(result.as_dict(), indent=2))
    else:
        click.echo(format_result(result, precision=settings.report_precision))


@cli.command("sweep")
@click.argument("successes", type=int)
@click.argument("trials", type=int)
@click.option("--confidence", default=settings.confidence_level, type=float, show_default=True)
@click.option(
    "--factor",
    "factors",
    multiple=True,
    type=int,
    help="Scale factor applied to both counts (repeatable); defaults to WILSON_SCALE_FACTORS",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON instead of text")
def sweep_cmd(successes: int, trials: int, confidence: float, factors: tuple[int, ...], as_json: bool) -> None:
    """Show how the interval narrows as the counts are scaled up."""

    factors = factors or settings.scale_factors
    try:
        results = scale_sweep(successes, trials, factors, confidence)
    except InvalidArgument as exc:
        raise click.UsageError(str(exc)) from exc

    LOGGER.debug("sweep %s/%s over %d factors", successes, trials, len(results))
    if as_json:
        payload = [{"factor": factor, **row.as_dict()} for factor, row in zip(factors, results)]
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(sweep_table(results, precision=settings.report_precision))


@cli.command("normal")
@click.option("--confidence", default=settings.confidence_level, type=float, show_default=True)
def normal_cmd(confidence: float) -> None:
    """Print the critical value with a pdf/cdf sanity check."""

    try:
        lam = critical_value(confidence)
    except InvalidArgument as exc:
        raise click.UsageError(str(exc)) from exc

    p = settings.report_precision
    click.echo(f"critical value: {lam:.{p + 3}f}")
    click.echo(f"pdf(critical value): {pdf(lam):.{p}f}")
    click.echo(f"cdf(critical value): {cdf(lam):.{p}f} (target {0.5 * (1.0 + confidence):.{p}f})")


if __name__ == "__main__":
    cli()
