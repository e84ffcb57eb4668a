"""Mapper functions to convert between domain entries and stored CSV rows.

This layer isolates the conversion logic so the record format can change
without touching the domain services.
"""

from tithe.domain.entities import Entry, Month
from tithe.domain.errors import ParseError, SerializationError, wrong_field_count
from tithe.utils.month_parser import parse_month
from tithe.utils.number_parser import parse_amount, parse_year

# Schema order; also the header row of every store file.
FIELDNAMES = ("month", "year", "group", "subgroup", "amount", "note")


def entry_to_row(entry: Entry) -> list[str]:
    """Convert a domain Entry to a list of CSV field values.

    Raises:
        SerializationError: If a field does not have its schema type
    """
    if not isinstance(entry, Entry):
        raise SerializationError(f"Cannot serialize {type(entry).__name__} as an entry")
    if not isinstance(entry.month, Month):
        raise SerializationError(f"Invalid month value: {entry.month!r}")
    for field_name in ("year", "amount"):
        value = getattr(entry, field_name)
        # bool is an int subclass but is not a valid number here
        if not isinstance(value, int) or isinstance(value, bool):
            raise SerializationError(f"Invalid {field_name} value: {value!r}")
    for field_name in ("group", "subgroup", "note"):
        value = getattr(entry, field_name)
        if not isinstance(value, str):
            raise SerializationError(f"Invalid {field_name} value: {value!r}")

    row = [
        entry.month.label,
        str(entry.year),
        entry.group,
        entry.subgroup,
        str(entry.amount),
        entry.note,
    ]
    # Store files are UTF-8; reject text that cannot be written before any write
    try:
        "".join(row).encode("utf-8")
    except UnicodeEncodeError as e:
        raise SerializationError(f"Entry text is not valid UTF-8: {e}") from e
    return row


def row_to_entry(row: list[str], line_number: int | None = None) -> Entry:
    """Convert a list of CSV field values (schema order) to a domain Entry.

    Raises:
        ParseError: If the row has the wrong arity or an unparsable field
    """
    if len(row) != len(FIELDNAMES):
        raise ParseError(wrong_field_count(len(FIELDNAMES), len(row)), line_number)

    month_str, year_str, group, subgroup, amount_str, note = row
    try:
        return Entry(
            month=parse_month(month_str),
            year=parse_year(year_str),
            group=group,
            subgroup=subgroup,
            amount=parse_amount(amount_str),
            note=note,
        )
    except ValueError as e:
        raise ParseError(str(e), line_number) from e
