"""CSV file implementation of the record store."""

import csv
import logging
import os
from pathlib import Path
from typing import Optional, TextIO

from tithe.domain.entities import Entry
from tithe.domain.errors import ParseError, StoreIOError, store_not_open, wrong_field_count
from tithe.store.base import RecordStore
from tithe.store.mappers import FIELDNAMES, entry_to_row, row_to_entry

logger = logging.getLogger(__name__)


class CSVRecordStore(RecordStore):
    """Append-only CSV file of entries with a single header row.

    The header is written by the first append to a file that held no data
    when it was opened. There is no locking: concurrent writers to the same
    file race.
    """

    def __init__(self, path: str | Path):
        """Initialize CSV record store.

        Args:
            path: Path to the CSV file (created on open if missing)
        """
        self.path = Path(path)
        self._file: Optional[TextIO] = None
        self._has_data = False
        self._needs_line_break = False

    @property
    def is_open(self) -> bool:
        return self._file is not None

    @property
    def existed(self) -> bool:
        """Whether the file already held data when it was opened."""
        return self._has_data

    def open(self) -> None:
        """Open the file for appending and reading, creating it if missing."""
        if self._file is not None:
            return

        try:
            self._file = open(self.path, "a+", newline="", encoding="utf-8")
            self._file.seek(0, os.SEEK_END)
            self._has_data = self._file.tell() > 0
            if self._has_data:
                self._needs_line_break = not self._ends_with_line_break()
        except OSError as e:
            self._file = None
            raise StoreIOError(f"Cannot open record store '{self.path}': {e}") from e

        logger.debug(
            "Opened record store %s (%s)",
            self.path,
            "existing" if self._has_data else "new",
        )

    def close(self) -> None:
        """Close the file if it is open."""
        if self._file is None:
            return
        try:
            self._file.close()
        finally:
            self._file = None
        logger.debug("Closed record store %s", self.path)

    def _require_file(self) -> TextIO:
        if self._file is None:
            raise StoreIOError(store_not_open(str(self.path)))
        return self._file

    def append(self, entry: Entry) -> None:
        """Append an entry as a new trailing row.

        Raises:
            SerializationError: If the entry cannot be encoded
            StoreIOError: If the file cannot be written
        """
        f = self._require_file()
        row = entry_to_row(entry)

        try:
            writer = csv.writer(f, lineterminator="\n")
            if self._needs_line_break:
                f.write("\n")
                self._needs_line_break = False
            if not self._has_data:
                writer.writerow(FIELDNAMES)
                logger.debug("Wrote header row to %s", self.path)
            writer.writerow(row)
            f.flush()
        except (OSError, csv.Error) as e:
            raise StoreIOError(f"Cannot write to record store '{self.path}': {e}") from e

        self._has_data = True
        logger.debug("Appended entry to %s: %s", self.path, row)

    def read_all(self) -> list[Entry]:
        """Read every entry in file order, skipping the header row.

        Blank lines are ignored. An empty file yields an empty list.

        Raises:
            ParseError: If the header or any row is malformed
            StoreIOError: If the file cannot be read
        """
        f = self._require_file()
        entries: list[Entry] = []
        column_order: Optional[list[int]] = None

        try:
            f.seek(0)
            reader = csv.reader(f)
            for row in reader:
                if not row:
                    continue
                if column_order is None:
                    column_order = self._parse_header(row, reader.line_num)
                    continue
                if len(row) != len(FIELDNAMES):
                    raise ParseError(
                        wrong_field_count(len(FIELDNAMES), len(row)), reader.line_num
                    )
                ordered = [row[index] for index in column_order]
                entries.append(row_to_entry(ordered, reader.line_num))
        except UnicodeDecodeError as e:
            raise ParseError(f"Record store '{self.path}' is not valid UTF-8: {e}") from e
        except csv.Error as e:
            raise ParseError(f"Malformed CSV in '{self.path}': {e}") from e
        except OSError as e:
            raise StoreIOError(f"Cannot read record store '{self.path}': {e}") from e

        logger.debug("Read %d entries from %s", len(entries), self.path)
        return entries

    def _parse_header(self, row: list[str], line_number: int) -> list[int]:
        """Map each schema field to its column index in the header row."""
        header = [name.strip() for name in row]
        if sorted(header) != sorted(FIELDNAMES):
            raise ParseError(
                f"invalid header {','.join(header)!r}, expected {','.join(FIELDNAMES)!r}",
                line_number,
            )
        return [header.index(name) for name in FIELDNAMES]

    def _ends_with_line_break(self) -> bool:
        """Whether the last byte of the file is a line terminator."""
        with open(self.path, "rb") as raw:
            raw.seek(-1, os.SEEK_END)
            return raw.read(1) in (b"\n", b"\r")
