"""Add entry command."""

import click

from tithe.cli.error_handling import handle_domain_error
from tithe.cli.param_types import AMOUNT, MONTH, YEAR
from tithe.cli.store_resolution import open_store_or_exit
from tithe.domain.entities import Month
from tithe.domain.entry import EntryService
from tithe.domain.errors import DomainError


@click.command(
    "add",
    # Lets negative amounts like -50 through as the AMOUNT argument
    context_settings={"ignore_unknown_options": True},
)
@click.argument("amount", type=AMOUNT)
@click.option("--month", "-m", type=MONTH, required=True, help="Month (name, abbreviation or 1-12)")
@click.option("--year", "-y", type=YEAR, required=True, help="Year")
@click.option("--group", "-g", required=True, help="Group (e.g., 'Food')")
@click.option("--subgroup", "-s", required=True, help="Subgroup (e.g., 'Groceries')")
@click.option("--note", "-n", default="", help="Note")
@click.pass_context
def add_entry(
    ctx,
    amount: int,
    month: Month,
    year: int,
    group: str,
    subgroup: str,
    note: str,
):
    """Add a new expense or income.

    AMOUNT can be a negative or positive whole number.

    Examples:
        tithe add -50 --month March --year 2023 --group Food --subgroup Groceries
        tithe add 1000 -m jan -y 2024 -g Salary -s Job --note "January pay"
    """
    store = open_store_or_exit(ctx)
    service = EntryService(store)

    try:
        entry = service.add_entry(
            amount=amount,
            month=month,
            year=year,
            group=group,
            subgroup=subgroup,
            note=note,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Added {entry.amount} to {entry.group} > {entry.subgroup} for {entry.month} {entry.year}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
