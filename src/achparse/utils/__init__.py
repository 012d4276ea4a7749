"""Utility functions for achparse."""

from achparse.utils.date_parser import parse_date, parse_ach_date
from achparse.utils.amount_parser import parse_amount, cents_to_dollars

__all__ = ["parse_date", "parse_ach_date", "parse_amount", "cents_to_dollars"]
