"""
Pydantic models for scanned receipts and the expense form.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
import datetime
from decimal import Decimal


SUPPORTED_CURRENCIES = ['USD', 'EUR', 'GBP', 'CAD', 'AUD', 'JPY', 'CNY', 'INR']

DEFAULT_CATEGORIES = [
    'Food & Dining',
    'Transportation',
    'Entertainment',
    'Shopping',
    'Utilities',
    'Health',
    'Travel',
    'Education',
    'Business',
    'Other',
]


class DraftResponse(BaseModel):
    """Extracted fields as returned by the API (None = not found)."""
    merchant: Optional[str] = None
    date: Optional[datetime.date] = None
    total: Optional[Decimal] = None
    tax: Decimal = Decimal("0.00")


class ExpenseFormDefaults(BaseModel):
    """
    Initial values for the editable expense form.

    Every field is a string input: "" renders an empty input for the user
    to fill, anything else is prefilled and still editable.
    """
    date: str = ""
    merchant: str = ""
    total: str = ""
    tax: str = "0.00"
    currency: str = "CAD"
    category: str = DEFAULT_CATEGORIES[0]
    notes: str = ""


class ScanTextRequest(BaseModel):
    """Request model for extracting a draft from already-recognized text."""
    text: str = ""


class ScanResponse(BaseModel):
    """Response model for a scan."""
    draft: DraftResponse
    form: ExpenseFormDefaults
    text_found: bool
    message: Optional[str] = None
    candidates: Optional[dict[str, list[dict]]] = None  # Only with debug=true


class ExpenseSubmission(BaseModel):
    """
    Model for an expense submitted from the form.

    Validation lives here, not in extraction: a Draft may be incomplete.
    """
    date: datetime.date
    merchant: str = Field(..., min_length=1)
    total: Decimal = Field(..., ge=Decimal("0.01"), decimal_places=2)
    tax: Optional[Decimal] = Field(None, ge=Decimal("0"), decimal_places=2)
    currency: str = "CAD"
    category: str = Field(..., min_length=1)
    notes: Optional[str] = None

    @field_validator('merchant', 'category')
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError('must not be blank')
        return value

    @field_validator('currency')
    @classmethod
    def supported_currency(cls, value: str) -> str:
        value = value.strip().upper()
        if value not in SUPPORTED_CURRENCIES:
            raise ValueError(f'unsupported currency: {value}')
        return value


class ExpenseRecord(ExpenseSubmission):
    """A new expense built from a validated submission."""
    id: str
    created_at: str  # Store as string
