"""
Console formatting helpers shared by the applications.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Union

DISPLAY_DATE_FORMAT = "%d-%b-%Y"  # 05-Mar-2026


def format_currency(amount: Union[Decimal, int, float], symbol: str = "$") -> str:
    """Format an amount like `$1,234.50`, with the sign before the symbol."""
    amount = Decimal(str(amount))
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def format_date(value: Union[date, datetime]) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def print_section(title: str) -> None:
    print(f"\n--- {title} ---")


def print_header(title: str) -> None:
    print(f"\n=== {title} ===")
