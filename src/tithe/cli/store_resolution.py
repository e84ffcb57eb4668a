"""CLI helpers for opening the record store."""

import click

from tithe.cli.error_handling import handle_domain_error
from tithe.domain.errors import StoreIOError
from tithe.store.base import RecordStore
from tithe.store.factories import create_csv_store


def open_store_or_exit(ctx: click.Context) -> RecordStore:
    """Open the configured record store, closing it with the context."""
    store = create_csv_store(store_path=ctx.obj.get("store_path"))
    try:
        store.open()
    except StoreIOError as e:
        handle_domain_error(ctx, e)
    ctx.call_on_close(store.close)
    return store
