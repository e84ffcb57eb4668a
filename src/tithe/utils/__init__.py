"""Utility functions for tithe."""

from tithe.utils.month_parser import parse_month
from tithe.utils.number_parser import parse_amount, parse_year
from tithe.utils.date_parser import get_period_filter

__all__ = ["parse_month", "parse_amount", "parse_year", "get_period_filter"]
