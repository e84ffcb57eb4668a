"""Date period utilities."""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from tithe.domain.entities import Month

PERIODS = ("this-month", "last-month", "this-year", "last-year")


def get_period_filter(
    period: str, today: Optional[date] = None
) -> tuple[Optional[Month], int]:
    """Get the (month, year) summary filter for a named period.

    Args:
        period: Period string (this-month, last-month, this-year, last-year)
        today: Reference date, defaults to the current date

    Returns:
        Tuple of (month, year). Month is None for whole-year periods.

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    if today is None:
        today = date.today()

    if period == "this-month":
        return Month(today.month), today.year

    elif period == "last-month":
        previous = today - relativedelta(months=1)
        return Month(previous.month), previous.year

    elif period == "this-year":
        return None, today.year

    elif period == "last-year":
        return None, (today - relativedelta(years=1)).year

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
        )
