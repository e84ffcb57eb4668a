"""Tests for CLI period filter helper."""

from datetime import date

import click
import pytest

from tithe.cli.period_filters import resolve_cli_period
from tithe.domain.entities import Month


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_period_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_period(_ctx(), month=None, year=None, period_flags=period_flags)

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Only one period option" in err


def test_resolve_cli_period_rejects_period_with_year(capsys):
    period_flags = {"this-year": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_period(_ctx(), month=None, year=2024, period_flags=period_flags)

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "cannot be combined" in err


def test_resolve_cli_period_returns_period_filter():
    period_flags = {"this-month": False, "last-month": True}

    month, year = resolve_cli_period(
        _ctx(),
        month=None,
        year=None,
        period_flags=period_flags,
        today=date(2024, 1, 15),
    )

    assert (month, year) == (Month.DECEMBER, 2023)


def test_resolve_cli_period_passes_explicit_values_through():
    month, year = resolve_cli_period(
        _ctx(), month=Month.MARCH, year=2023, period_flags={"this-year": False}
    )

    assert (month, year) == (Month.MARCH, 2023)


def test_resolve_cli_period_no_filters():
    assert resolve_cli_period(_ctx(), month=None, year=None, period_flags={}) == (None, None)
