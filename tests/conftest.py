"""Shared pytest fixtures for tithe tests."""

import os
import tempfile

import pytest

from tithe.domain.entities import Entry, Month
from tithe.domain.entry import EntryService
from tithe.domain.summary import SummaryService
from tithe.store.factories import create_csv_store


@pytest.fixture
def temp_store_path():
    """Return a path in a temporary directory where no store exists yet."""
    fd, store_path = tempfile.mkstemp(suffix=".csv")
    os.close(fd)
    os.unlink(store_path)

    yield store_path

    # Cleanup
    if os.path.exists(store_path):
        os.unlink(store_path)


@pytest.fixture
def temp_store(temp_store_path):
    """Create an open CSV record store backed by a temporary file."""
    store = create_csv_store(store_path=temp_store_path)
    store.open()

    yield store

    store.close()


@pytest.fixture
def entry_service(temp_store):
    """Create an EntryService with a temporary store."""
    return EntryService(temp_store)


@pytest.fixture
def summary_service(temp_store):
    """Create a SummaryService with a temporary store."""
    return SummaryService(temp_store)


@pytest.fixture
def sample_entries():
    """Entries spanning several months, stored out of date order."""
    return [
        Entry(Month.FEBRUARY, 2024, "Food", "Groceries", -40),
        Entry(Month.JANUARY, 2024, "Food", "Groceries", -50),
        Entry(Month.JANUARY, 2024, "Salary", "Job", 1000, "January pay"),
        Entry(Month.JANUARY, 2024, "Food", "Dining", -20),
        Entry(Month.DECEMBER, 2023, "Gifts", "Family", -150),
        Entry(Month.JANUARY, 2024, "Food", "Groceries", -15),
        Entry(Month.FEBRUARY, 2024, "Salary", "Job", 1000),
    ]


@pytest.fixture
def populated_store(temp_store, sample_entries):
    """Temporary store holding the sample entries."""
    for entry in sample_entries:
        temp_store.append(entry)
    return temp_store


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
