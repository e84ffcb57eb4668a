"""Integer parsing utilities for amounts and years."""

import re

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def _parse_signed_integer(value: str, what: str) -> int:
    if value is None:
        raise ValueError(f"Empty {what} string")

    text = str(value).strip()
    if not text:
        raise ValueError(f"Empty {what} string")

    if not _INTEGER_RE.match(text):
        raise ValueError(f"Could not parse {what} '{text}': expected a whole number")
    return int(text)


def parse_amount(amount_str: str) -> int:
    """Parse an amount string into a signed integer.

    Amounts have no decimal subdivision: "-50", "+1000" and "0" are valid,
    "12.50" and "$12" are not.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    return _parse_signed_integer(amount_str, "amount")


def parse_year(year_str: str) -> int:
    """Parse a year string into a signed integer.

    Raises:
        ValueError: If year string cannot be parsed
    """
    return _parse_signed_integer(year_str, "year")
