"""Entry domain service."""

import logging

from tithe.domain.entities import Entry, Month
from tithe.store.base import RecordStore

logger = logging.getLogger(__name__)


class EntryService:
    """Service for recording ledger entries."""

    def __init__(self, store: RecordStore):
        """Initialize entry service.

        Args:
            store: Open record store instance
        """
        self.store = store

    def add_entry(
        self,
        amount: int,
        month: Month,
        year: int,
        group: str,
        subgroup: str,
        note: str = "",
    ) -> Entry:
        """Create an entry and append it to the store.

        Args:
            amount: Signed amount (positive income, negative expense)
            month: Month
            year: Year
            group: Category label
            subgroup: Sub-category label
            note: Optional free-text annotation

        Returns:
            The stored entry

        Raises:
            SerializationError: If the entry cannot be encoded for storage
        """
        entry = Entry(
            month=month,
            year=year,
            group=group,
            subgroup=subgroup,
            amount=amount,
            note=note or "",
        )
        self.store.append(entry)
        logger.info("Recorded %s %s entry in %s > %s", entry.month, entry.year, group, subgroup)
        return entry

    def list_entries(self) -> list[Entry]:
        """Return every stored entry in append order."""
        return self.store.read_all()
