"""
Money parsing utilities for receipt amounts.

Amounts on receipts are captured in US notation only:
- 1,234.56 (comma thousands separator)
- 58.12
Currency symbols are not interpreted here; the user picks the currency
on the expense form.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional
import re


# Digits with optional comma grouping, then exactly two fractional digits
AMOUNT_PATTERN = re.compile(r'^(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2}$')

ZERO = Decimal('0.00')


def to_amount(amount_str: str) -> Optional[Decimal]:
    """
    Parse a captured amount string into a non-negative Decimal.

    Args:
        amount_str: Amount as captured by an extraction pattern (e.g., "1,234.56")

    Returns:
        Decimal amount or None if the string is not a two-decimal amount

    Examples:
        >>> to_amount("1,234.56")
        Decimal('1234.56')
        >>> to_amount("42.50")
        Decimal('42.50')
        >>> to_amount("abc") is None
        True
    """
    if not amount_str or not isinstance(amount_str, str):
        return None

    cleaned = amount_str.strip()
    if not AMOUNT_PATTERN.match(cleaned):
        return None

    # Remove commas (thousands separator)
    cleaned = cleaned.replace(',', '')

    try:
        return Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None


def format_amount(amount: Optional[Decimal]) -> str:
    """
    Format a Decimal for an editable form input.

    Returns an empty string for a missing amount so the input renders blank.

    Examples:
        >>> format_amount(Decimal('58.1'))
        '58.10'
        >>> format_amount(None)
        ''
    """
    if amount is None:
        return ''
    return str(amount.quantize(Decimal('0.01')))
