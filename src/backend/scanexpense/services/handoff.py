"""
Handoff from an extracted Draft to the editable expense form.
"""

import uuid
import logging
from datetime import datetime, timezone
from typing import Optional

from scanexpense.config import settings
from scanexpense.models.draft import Draft
from scanexpense.models.receipt import (
    DEFAULT_CATEGORIES,
    SUPPORTED_CURRENCIES,
    DraftResponse,
    ExpenseFormDefaults,
    ExpenseRecord,
    ExpenseSubmission,
)
from scanexpense.utils.money import format_amount

logger = logging.getLogger(__name__)


def _form_currency(currency: Optional[str]) -> str:
    """Currency code the form can accept, or the configured default."""
    if currency and currency.strip().upper() in SUPPORTED_CURRENCIES:
        return currency.strip().upper()
    return settings.DEFAULT_CURRENCY


def to_form_defaults(draft: Draft, currency: Optional[str] = None) -> ExpenseFormDefaults:
    """
    Render a Draft as initial values for the expense form.

    Missing fields become empty inputs; found fields are prefilled. Nothing
    is validated here: the form validates on submission.

    Args:
        draft: Extraction result
        currency: Currency preselected on the form; unsupported or missing
            values fall back to settings.DEFAULT_CURRENCY

    Returns:
        ExpenseFormDefaults
    """
    return ExpenseFormDefaults(
        date=draft.date.isoformat() if draft.date else "",
        merchant=draft.merchant or "",
        total=format_amount(draft.total),
        tax=format_amount(draft.tax),
        currency=_form_currency(currency),
        category=DEFAULT_CATEGORIES[0],
        notes="",
    )


def to_draft_response(draft: Draft) -> DraftResponse:
    """Convert a Draft to its API model."""
    return DraftResponse(
        merchant=draft.merchant,
        date=draft.date,
        total=draft.total,
        tax=draft.tax,
    )


def create_expense_record(submission: ExpenseSubmission) -> ExpenseRecord:
    """
    Build a new expense record from a validated form submission.

    The Draft the form started from is left as it was.
    """
    record = ExpenseRecord(
        **submission.model_dump(),
        id=str(uuid.uuid4()),
        created_at=datetime.now(timezone.utc).isoformat(),
    )
    logger.info("Expense record created", extra={
        "expense_id": record.id,
        "currency": record.currency,
        "category": record.category,
    })
    return record
