"""Utility functions for reimburse."""

from reimburse.utils.date_parser import parse_date, month_range
from reimburse.utils.amounts import format_milliunits
from reimburse.utils.resolver import resolve_record

__all__ = ["parse_date", "month_range", "format_milliunits", "resolve_record"]
