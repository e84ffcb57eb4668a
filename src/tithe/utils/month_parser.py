"""Month parsing utilities."""

from tithe.domain.entities import Month

_MONTHS_BY_NAME = {month.name.lower(): month for month in Month}
_MONTHS_BY_ABBREVIATION = {month.name[:3].lower(): month for month in Month}
# Common four-letter form
_MONTHS_BY_ABBREVIATION["sept"] = Month.SEPTEMBER


def parse_month(month_str: str) -> Month:
    """Parse a month string into a Month.

    Handles various formats:
    - "March", "march", "MARCH"
    - "Mar", "mar."
    - "3", "03"

    Args:
        month_str: Month string

    Returns:
        Month value

    Raises:
        ValueError: If month string cannot be parsed
    """
    if isinstance(month_str, Month):
        return month_str

    if month_str is None or not str(month_str).strip():
        raise ValueError("Empty month string")

    value = str(month_str).strip().lower().rstrip(".")

    if value.isdigit():
        number = int(value)
        if 1 <= number <= 12:
            return Month(number)
        raise ValueError(f"Month number out of range: '{month_str}' (expected 1-12)")

    month = _MONTHS_BY_NAME.get(value) or _MONTHS_BY_ABBREVIATION.get(value)
    if month is None:
        raise ValueError(f"Unrecognized month: '{month_str}'")
    return month
