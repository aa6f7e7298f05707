"""
Numeric date resolution for receipt dates.

Resolves A/B/C tokens (also A-B-C and A.B.C) into calendar dates.
Without a locale signal the month/day order is ambiguous:
- 15/03/2024 → 2024-03-15 (only a day-first reading is valid)
- 03/04/2024 → 2024-03-04 (month-first when both readings fit)
"""

from datetime import date
from enum import Enum
from typing import Optional
import re


class DateOrder(Enum):
    """Day/month order hints."""
    MONTH_FIRST = "MM/DD"  # North American
    DAY_FIRST = "DD/MM"  # European


DATE_SEPARATORS = re.compile(r'[/.-]')


def resolve(date_token: str, order_hint: Optional[DateOrder] = None) -> Optional[date]:
    """
    Resolve a three-part numeric date token into a date.

    Args:
        date_token: Token isolated by a date pattern (e.g., "03/04/2024", "3-4-24")
        order_hint: Optional locale hint; overrides the numeric heuristic

    Returns:
        date or None if the token is malformed or not a real calendar date

    Examples:
        >>> resolve("15/03/2024")
        datetime.date(2024, 3, 15)
        >>> resolve("03/04/2024")
        datetime.date(2024, 3, 4)
        >>> resolve("13/13/2024") is None
        True
    """
    if not date_token or not isinstance(date_token, str):
        return None

    parts = DATE_SEPARATORS.split(date_token.strip())
    if len(parts) != 3 or not all(part.isdecimal() for part in parts):
        return None

    first, second = int(parts[0]), int(parts[1])

    # 4-digit year as written, anything else is 20YY
    year = int(parts[2])
    if len(parts[2]) != 4:
        year += 2000

    month, day = _order_month_day(first, second, order_hint)

    try:
        return date(year, month, day)
    except ValueError:
        return None


def _order_month_day(first: int, second: int, order_hint: Optional[DateOrder]) -> tuple[int, int]:
    """Return (month, day) for the first two parts of a date token."""
    if order_hint == DateOrder.DAY_FIRST:
        return second, first
    if order_hint == DateOrder.MONTH_FIRST:
        return first, second

    # Day-first only when it is the sole valid reading
    if first > 12 and second <= 12:
        return second, first
    return first, second
