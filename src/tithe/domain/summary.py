"""Summary grouping domain service."""

import logging
from typing import Iterable, Optional, Sequence

from tithe.domain.entities import (
    Entry,
    GroupTotal,
    Month,
    PeriodSummary,
    SubgroupTotal,
    SummaryReport,
)
from tithe.domain.errors import UsageError, month_without_year
from tithe.store.base import RecordStore

logger = logging.getLogger(__name__)


def filter_entries(
    entries: Iterable[Entry],
    month: Optional[Month] = None,
    year: Optional[int] = None,
) -> list[Entry]:
    """Filter entries to a year, or to an exact (month, year) pair.

    Relative order of the entries is preserved. With neither filter all
    entries are returned.

    Raises:
        UsageError: If month is given without year
    """
    if month is not None and year is None:
        raise UsageError(month_without_year())

    if year is None:
        return list(entries)
    if month is None:
        return [entry for entry in entries if entry.year == year]
    return [entry for entry in entries if entry.year == year and entry.month == month]


def group_entries(entries: Sequence[Entry]) -> tuple[PeriodSummary, ...]:
    """Group entries by (year, month), then group, then subgroup.

    Periods are ordered chronologically. Groups and subgroups keep the order
    in which they are first seen within their parent bucket; entries sharing
    a key need not be adjacent.
    """
    # (year, month) -> group -> subgroup -> total; dicts keep first-seen order
    buckets: dict[tuple[int, Month], dict[str, dict[str, int]]] = {}
    for entry in entries:
        groups = buckets.setdefault((entry.year, entry.month), {})
        subgroups = groups.setdefault(entry.group, {})
        subgroups[entry.subgroup] = subgroups.get(entry.subgroup, 0) + entry.amount

    periods = []
    for (year, month), groups in sorted(buckets.items(), key=lambda item: item[0]):
        group_totals = []
        for group_name, subgroups in groups.items():
            subgroup_totals = tuple(
                SubgroupTotal(name=name, amount=amount)
                for name, amount in subgroups.items()
            )
            group_totals.append(
                GroupTotal(
                    name=group_name,
                    amount=sum(subgroup.amount for subgroup in subgroup_totals),
                    subgroups=subgroup_totals,
                )
            )
        periods.append(
            PeriodSummary(
                year=year,
                month=month,
                amount=sum(group.amount for group in group_totals),
                groups=tuple(group_totals),
            )
        )

    logger.debug("Grouped %d entries into %d periods", len(entries), len(periods))
    return tuple(periods)


class SummaryService:
    """Service for building grouped summary reports."""

    def __init__(self, store: RecordStore):
        """Initialize summary service.

        Args:
            store: Open record store instance
        """
        self.store = store

    def build_summary_report(
        self,
        month: Optional[Month] = None,
        year: Optional[int] = None,
    ) -> SummaryReport:
        """Load all entries, filter by period and group them.

        Args:
            month: Optional month filter (requires year)
            year: Optional year filter

        Returns:
            SummaryReport with chronologically ordered periods

        Raises:
            UsageError: If month is given without year
            ParseError: If any stored row is malformed
        """
        entries = filter_entries(self.store.read_all(), month=month, year=year)
        return SummaryReport(
            month=month,
            year=year,
            entries=tuple(entries),
            periods=group_entries(entries),
        )
