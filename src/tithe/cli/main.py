"""Main CLI entry point."""

import click

from tithe.logging_utils import configure_logging
from tithe.store.factories import DEFAULT_STORE_PATH

# Import and register all commands at module level
from tithe.cli.commands import add, summary


@click.group()
@click.option(
    "--file",
    "-f",
    "store_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_STORE_PATH,
    show_default=True,
    help="Path to the ledger CSV file",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.version_option(package_name="tithe")
@click.pass_context
def cli(ctx, store_path: str, verbose: bool):
    """Tithe - personal income and expense ledger.

    Record entries tagged with a group and subgroup, then summarize them
    by month.
    """
    ctx.ensure_object(dict)
    configure_logging(verbose=verbose)

    # The store is opened by each command once its options are validated
    ctx.obj["store_path"] = store_path


# Register all commands
add.register_commands(cli)
summary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
