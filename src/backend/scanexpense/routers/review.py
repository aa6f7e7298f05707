"""
Review API router for expenses confirmed on the form.
"""

from fastapi import APIRouter

from scanexpense.models.receipt import (
    DEFAULT_CATEGORIES,
    SUPPORTED_CURRENCIES,
    ExpenseRecord,
    ExpenseSubmission,
)
from scanexpense.services.handoff import create_expense_record

router = APIRouter(prefix="/review", tags=["review"])


@router.post("/validate", response_model=ExpenseRecord)
async def validate_expense(submission: ExpenseSubmission):
    """
    Validate a submitted expense form and return the new expense record.

    Required: date, merchant, category, total > 0. Tax may be omitted but
    not negative. Field errors come back as 422 from request validation.
    Nothing is persisted here.
    """
    return create_expense_record(submission)


@router.get("/options")
async def get_form_options():
    """Choices offered by the expense form."""
    return {
        'currencies': SUPPORTED_CURRENCIES,
        'categories': DEFAULT_CATEGORIES,
    }
