"""
Tests for the Draft → expense form handoff and form-side validation.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from scanexpense.models.draft import Draft
from scanexpense.models.receipt import DEFAULT_CATEGORIES, ExpenseSubmission
from scanexpense.services.handoff import create_expense_record, to_draft_response, to_form_defaults


def test_form_defaults_for_full_draft():
    draft = Draft(date=date(2024, 3, 4), total=Decimal('58.12'))
    form = to_form_defaults(draft, currency='USD')

    assert form.date == '2024-03-04'
    assert form.total == '58.12'
    assert form.tax == '0.00'
    assert form.merchant == ''
    assert form.currency == 'USD'
    assert form.category == DEFAULT_CATEGORIES[0]
    assert form.notes == ''


def test_form_defaults_for_empty_draft():
    form = to_form_defaults(Draft.empty())

    assert form.date == ''
    assert form.merchant == ''
    assert form.total == ''
    assert form.tax == '0.00'
    assert form.currency == 'CAD'


@pytest.mark.parametrize("currency, expected", [
    ('usd', 'USD'),
    ('xyz', 'CAD'),
    ('', 'CAD'),
    (None, 'CAD'),
])
def test_form_currency_falls_back_when_unsupported(currency, expected):
    form = to_form_defaults(Draft.empty(), currency=currency)
    assert form.currency == expected, f"Expected {expected}, got {form.currency}"


def test_handoff_does_not_change_draft():
    draft = Draft(total=Decimal('5.00'))
    to_form_defaults(draft)
    assert draft == Draft(total=Decimal('5.00'))


def test_draft_response():
    response = to_draft_response(Draft(date=date(2024, 3, 4), total=Decimal('58.12')))
    assert response.model_dump(mode='json') == {
        'merchant': None,
        'date': '2024-03-04',
        'total': '58.12',
        'tax': '0.00',
    }


VALID_FORM = {
    'date': '2024-03-04',
    'merchant': 'Fresh Mart',
    'total': '58.12',
    'tax': '0.00',
    'currency': 'cad',
    'category': 'Food & Dining',
}


def test_submission_creates_new_record():
    submission = ExpenseSubmission(**VALID_FORM)
    record = create_expense_record(submission)

    assert record.id
    assert record.created_at
    assert record.merchant == 'Fresh Mart'
    assert record.total == Decimal('58.12')
    assert record.currency == 'CAD'
    assert record.date == date(2024, 3, 4)


def test_submission_tax_optional():
    form = {k: v for k, v in VALID_FORM.items() if k != 'tax'}
    assert ExpenseSubmission(**form).tax is None


@pytest.mark.parametrize("field_name, value", [
    ('merchant', '   '),
    ('total', '0.00'),
    ('total', '-1.00'),
    ('tax', '-0.01'),
    ('currency', 'XYZ'),
    ('category', ''),
    ('date', 'not-a-date'),
])
def test_submission_rejects(field_name, value):
    form = dict(VALID_FORM, **{field_name: value})
    with pytest.raises(ValidationError):
        ExpenseSubmission(**form)


def test_submission_requires_total():
    form = {k: v for k, v in VALID_FORM.items() if k != 'total'}
    with pytest.raises(ValidationError):
        ExpenseSubmission(**form)
