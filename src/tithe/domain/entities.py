"""Domain model entities for tithe.

These are pure data classes representing ledger concepts, independent of the
on-disk record format. Conversion to and from stored rows lives in
``tithe.store.mappers``.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Month(IntEnum):
    """Calendar month, valued 1-12 so months order chronologically."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def label(self) -> str:
        """Full English month name, e.g. "January"."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Entry:
    """A single income or expense record.

    Field order is the schema order used by the record store.
    """

    month: Month
    year: int
    group: str
    subgroup: str
    amount: int
    note: str = ""


@dataclass(frozen=True)
class SubgroupTotal:
    """Summed amount for one subgroup within a group."""

    name: str
    amount: int


@dataclass(frozen=True)
class GroupTotal:
    """Summed amount for one group within a period, with its subgroups."""

    name: str
    amount: int
    subgroups: tuple[SubgroupTotal, ...] = ()


@dataclass(frozen=True)
class PeriodSummary:
    """Summed amount for one (year, month) bucket, with its groups."""

    year: int
    month: Month
    amount: int
    groups: tuple[GroupTotal, ...] = ()

    @property
    def title(self) -> str:
        return f"{self.month.label} {self.year}"


@dataclass(frozen=True)
class SummaryReport:
    """Grouped totals produced by the summary operation."""

    month: Optional[Month]
    year: Optional[int]
    entries: tuple[Entry, ...]
    periods: tuple[PeriodSummary, ...]

    @property
    def total(self) -> int:
        """Sum of every period total."""
        return sum(period.amount for period in self.periods)

    @property
    def is_empty(self) -> bool:
        return not self.periods
