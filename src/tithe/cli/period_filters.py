"""CLI helpers for summary period resolution."""

from datetime import date
from typing import Optional

import click

from tithe.domain.entities import Month
from tithe.utils.date_parser import get_period_filter


def resolve_cli_period(
    ctx,
    *,
    month: Optional[Month],
    year: Optional[int],
    period_flags: dict[str, bool],
    today: Optional[date] = None,
) -> tuple[Optional[Month], Optional[int]]:
    """Resolve the summary (month, year) filter from period flags or explicit values."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --this-year, --last-year) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (month is not None or year is not None):
        click.echo(
            "Error: Period options (--this-month, --last-year, etc.) cannot be combined with --month or --year.",
            err=True,
        )
        ctx.exit(1)

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                return get_period_filter(period, today=today)

    return month, year
