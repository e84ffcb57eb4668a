"""Click parameter types for ledger values.

Conversion failures are reported as click usage errors, before any command
touches the record store.
"""

import click

from tithe.utils.month_parser import parse_month
from tithe.utils.number_parser import parse_amount, parse_year


class MonthType(click.ParamType):
    """Month name, abbreviation or number."""

    name = "month"

    def convert(self, value, param, ctx):
        try:
            return parse_month(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class AmountType(click.ParamType):
    """Signed whole-number amount."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_amount(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class YearType(click.ParamType):
    """Signed whole-number year."""

    name = "year"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_year(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


MONTH = MonthType()
AMOUNT = AmountType()
YEAR = YearType()
