"""Abstract record store interface."""

from abc import ABC, abstractmethod

from tithe.domain.entities import Entry


class RecordStore(ABC):
    """Abstract append-only store of ledger entries."""

    @abstractmethod
    def open(self) -> None:
        """Open the store, creating it if it does not exist."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the store."""
        pass

    @abstractmethod
    def append(self, entry: Entry) -> None:
        """Append one entry to the end of the store."""
        pass

    @abstractmethod
    def read_all(self) -> list[Entry]:
        """Read every stored entry in append order."""
        pass

    def __enter__(self) -> "RecordStore":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
