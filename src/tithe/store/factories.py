"""Record store factory functions."""

from pathlib import Path
from typing import Optional

from tithe.store.csv_store import CSVRecordStore

DEFAULT_STORE_PATH = "tithe.csv"


def create_csv_store(store_path: Optional[str | Path] = None) -> CSVRecordStore:
    """Create a CSV record store instance.

    Args:
        store_path: Path to the CSV file. If None, defaults to ``tithe.csv``
            in the current working directory.

    Returns:
        CSVRecordStore instance (not yet opened)
    """
    if store_path is None:
        store_path = DEFAULT_STORE_PATH
    return CSVRecordStore(store_path)
