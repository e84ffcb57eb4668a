"""Record store layer for tithe application."""

from tithe.store.base import RecordStore
from tithe.store.csv_store import CSVRecordStore
from tithe.store.factories import DEFAULT_STORE_PATH, create_csv_store

__all__ = ["RecordStore", "CSVRecordStore", "DEFAULT_STORE_PATH", "create_csv_store"]
