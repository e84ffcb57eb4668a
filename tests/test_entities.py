"""Tests for domain entities."""

import pytest

from tithe.domain.entities import (
    Entry,
    GroupTotal,
    Month,
    PeriodSummary,
    SubgroupTotal,
    SummaryReport,
)


class TestMonth:
    """Tests for Month enum."""

    def test_months_are_numbered_from_one(self):
        assert Month.JANUARY == 1
        assert Month.DECEMBER == 12
        assert len(Month) == 12

    def test_label_is_full_name(self):
        assert Month.MARCH.label == "March"
        assert str(Month.SEPTEMBER) == "September"

    def test_months_order_chronologically(self):
        assert sorted([Month.MARCH, Month.JANUARY, Month.FEBRUARY]) == [
            Month.JANUARY,
            Month.FEBRUARY,
            Month.MARCH,
        ]


class TestEntry:
    """Tests for Entry entity."""

    def test_create_entry(self):
        """Test creating an Entry with the default empty note."""
        entry = Entry(
            month=Month.MARCH,
            year=2023,
            group="Food",
            subgroup="Groceries",
            amount=-50,
        )
        assert entry.month is Month.MARCH
        assert entry.year == 2023
        assert entry.group == "Food"
        assert entry.subgroup == "Groceries"
        assert entry.amount == -50
        assert entry.note == ""

    def test_entry_immutability(self):
        """Test that Entry entities are immutable."""
        entry = Entry(Month.MARCH, 2023, "Food", "Groceries", -50)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            entry.amount = 10

    def test_duplicate_entries_are_equal(self):
        """Duplicate entries are allowed and compare equal field-for-field."""
        entry1 = Entry(Month.MARCH, 2023, "Food", "Groceries", -50)
        entry2 = Entry(Month.MARCH, 2023, "Food", "Groceries", -50)
        entry3 = Entry(Month.MARCH, 2023, "Food", "Groceries", -51)

        assert entry1 == entry2
        assert entry1 != entry3


class TestSummaryReport:
    """Tests for summary result entities."""

    def test_period_title(self):
        period = PeriodSummary(year=2024, month=Month.JANUARY, amount=0)
        assert period.title == "January 2024"

    def test_report_total_and_empty(self):
        food = GroupTotal("Food", -70, (SubgroupTotal("Groceries", -70),))
        report = SummaryReport(
            month=None,
            year=None,
            entries=(),
            periods=(
                PeriodSummary(2024, Month.JANUARY, -70, (food,)),
                PeriodSummary(2024, Month.FEBRUARY, 30, ()),
            ),
        )
        assert report.total == -40
        assert not report.is_empty

        empty = SummaryReport(month=None, year=None, entries=(), periods=())
        assert empty.total == 0
        assert empty.is_empty
