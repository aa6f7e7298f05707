"""
Draft value type produced by receipt extraction.
"""

from dataclasses import dataclass, field
import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class RawFields:
    """Candidate strings found in the text, before normalization."""
    merchant: Optional[str] = None
    date: Optional[str] = None
    total: Optional[str] = None
    tax: str = "0.00"


@dataclass(frozen=True)
class Draft:
    """
    Best-effort extraction result for one receipt, reviewed by a human
    before anything is saved.

    merchant, date and total are None when not found. tax is 0.00 when not
    found: receipts without an itemized tax line are treated as tax-free.
    """
    merchant: Optional[str] = None
    date: Optional[datetime.date] = None
    total: Optional[Decimal] = None
    tax: Decimal = field(default_factory=lambda: Decimal("0.00"))

    @classmethod
    def empty(cls) -> "Draft":
        return cls()
