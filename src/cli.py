"""Командная строка: подсчёт моментов углового расстояния стрелок часов.

Пример:
    coincidence run --list distinct
    coincidence run --separation 1/6 --json
"""

import json
import logging
from enum import Enum

import typer
from pydantic import ValidationError

from src.aggregation import CoincidenceAggregator
from src.core.contracts import validate_coincidence_report
from src.core.domain import (
    DEFAULT_BASIC_PERIOD,
    ClockConfig,
    day_count,
    hand_pair_generators,
)
from src.core.math import Rational

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)


class Listing(str, Enum):
    DISTINCT = "distinct"
    ALL = "all"
    NONE = "none"


def _build_config(basic_period: int, separation: str) -> ClockConfig:
    try:
        fraction = Rational.parse(separation)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--separation") from exc
    fraction.reduce()
    try:
        return ClockConfig(
            basic_period=basic_period,
            separation_numerator=fraction.numerator,
            separation_denominator=fraction.denominator,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _echo_indexed(instants) -> None:
    for index, instant in enumerate(instants, start=1):
        typer.echo(f"[{index}]: {instant}")


@app.callback()
def main() -> None:
    """Exact clock-hand coincidence counter."""


@app.command()
def run(
    basic_period: int = typer.Option(
        DEFAULT_BASIC_PERIOD, "--basic-period", help="Clock face period in hours."
    ),
    separation: str = typer.Option(
        "1/6", "--separation", help="Target hand separation as a fraction of a turn."
    ),
    listing: Listing = typer.Option(
        Listing.DISTINCT, "--list", help="Which instants to print."
    ),
    duplicates: bool = typer.Option(
        False, "--duplicates/--no-duplicates", help="Print instants shared by generators."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
    log_level: str = typer.Option("WARNING", "--log-level"),
) -> None:
    """Compute coincidence instants and exit non-zero on a validation mismatch."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level {log_level!r}", param_hint="--log-level")
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = _build_config(basic_period, separation)
    aggregator = CoincidenceAggregator(config.interval)
    aggregator.add_generators(hand_pair_generators(config))
    aggregator.compute()

    summary = aggregator.summary()
    full_day = day_count(summary.distinct_count, config)

    if as_json:
        report = summary.model_dump(mode="json")
        report["full_day_count"] = full_day
        validate_coincidence_report(report)
        typer.echo(json.dumps(report, indent=2))
    else:
        if listing is Listing.DISTINCT:
            _echo_indexed(aggregator.distinct_instants)
        elif listing is Listing.ALL:
            _echo_indexed(aggregator.all_instants)
        typer.echo("----------")
        typer.echo(f"All times: {summary.total_count}")
        typer.echo(f"Without duplication: {summary.distinct_count}")
        if duplicates:
            for instant in summary.duplicates:
                typer.echo(instant)
        typer.echo(f"For {config.hours_per_day}h: {full_day}")

    if not summary.approximation_consistent:
        logger.error("Exact and approximate deduplication disagree")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
