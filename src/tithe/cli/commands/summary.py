"""Summary command."""

from typing import Optional

import click

from tithe.cli.error_handling import handle_domain_error
from tithe.cli.param_types import MONTH, YEAR
from tithe.cli.period_filters import resolve_cli_period
from tithe.cli.report import render_summary
from tithe.cli.store_resolution import open_store_or_exit
from tithe.domain.entities import Month
from tithe.domain.errors import DomainError, UsageError, month_without_year
from tithe.domain.summary import SummaryService


@click.command("summary")
@click.option("--month", "-m", type=MONTH, help="Month to summarize (requires --year)")
@click.option("--year", "-y", type=YEAR, help="Year to summarize")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--last-month", is_flag=True, help="Filter to previous month")
@click.option("--this-year", is_flag=True, help="Filter to current year")
@click.option("--last-year", is_flag=True, help="Filter to previous year")
@click.pass_context
def summary(
    ctx,
    month: Optional[Month],
    year: Optional[int],
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
):
    """Show a summary of expenses and incomes.

    Totals are grouped by month, then group, then subgroup.
    """
    month, year = resolve_cli_period(
        ctx,
        month=month,
        year=year,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "this-year": this_year,
            "last-year": last_year,
        },
    )

    # Months repeat across years, so a month alone is not a filter
    if month is not None and year is None:
        handle_domain_error(ctx, UsageError(month_without_year()))

    store = open_store_or_exit(ctx)
    service = SummaryService(store)

    try:
        report = service.build_summary_report(month=month, year=year)
    except DomainError as e:
        handle_domain_error(ctx, e)

    for line in render_summary(report):
        click.echo(line)


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
