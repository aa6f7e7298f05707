"""
Receipt parser service for extracting a draft expense from OCR text.
"""

import logging
from typing import Dict, List, Optional

from scanexpense.models.draft import Draft, RawFields
from scanexpense.utils.money import to_amount, ZERO
from scanexpense.utils.dates import resolve
from scanexpense.utils.candidates import (
    FieldCandidate,
    PatternSpec,
    create_field_candidate,
)

logger = logging.getLogger(__name__)

# Two-decimal amount, optionally comma-grouped: 58.12, 1,234.56
AMOUNT = r'(\d{1,3}(?:,\d{3})+\.\d{2}|\d+\.\d{2})'


class ReceiptParser:
    """
    Service for parsing receipt text into a Draft.

    Extraction is a pure function of the text: the parser only holds
    compiled patterns, so one instance can be shared between requests.
    """

    def __init__(self):
        """Initialize parser with regex patterns."""
        self._init_patterns()

    def _init_patterns(self):
        """Initialize regex patterns for parsing, most specific first."""

        self.total_patterns = [
            PatternSpec(
                name='label_total_upper',
                pattern=r'TOTAL\s*\n\s*\$?' + AMOUNT,
                example='TOTAL\n$58.12',
                notes='Upper-case TOTAL label with the amount on the next line',
                rank=1,
            ),
            PatternSpec(
                name='label_total_title',
                pattern=r'Total\s*\n\s*' + AMOUNT,
                example='Total\n17.00',
                notes='Title-case Total label, bare amount on the next line',
                rank=2,
            ),
        ]

        self.date_patterns = [
            PatternSpec(
                name='numeric_date_four_digit_year',
                pattern=r'(?<!\d)(\d{1,2}[/.-]\d{1,2}[/.-]\d{4})(?!\d)',
                example='03/04/2024',
                notes='MM/DD/YYYY or DD/MM/YYYY, resolved by utils.dates',
                rank=1,
            ),
            PatternSpec(
                name='numeric_date_two_digit_year',
                pattern=r'(?<!\d)(\d{1,2}[/.-]\d{1,2}[/.-]\d{2})(?!\d)',
                example='03/04/24',
                rank=2,
            ),
        ]

        # No reliable signal for merchant; the user fills it in on the form.
        # Tax is never matched and defaults to zero.
        self.field_patterns: Dict[str, List[PatternSpec]] = {
            'merchant': [],
            'date': self.date_patterns,
            'total': self.total_patterns,
            'tax': [],
        }

    def find_candidates(self, text: str, field_name: str) -> List[FieldCandidate]:
        """
        Collect every match of every pattern for one field.

        Args:
            text: OCR-extracted text from receipt
            field_name: One of merchant, date, total, tax

        Returns:
            Candidates in pattern rank order, then text order
        """
        candidates: List[FieldCandidate] = []
        for spec in self.field_patterns[field_name]:
            for match in spec.compiled.finditer(text):
                candidates.append(create_field_candidate(field_name, spec, match))
        return candidates

    def match_field(self, text: str, field_name: str) -> Optional[FieldCandidate]:
        """
        Return the match of the first pattern, in rank order, that matches anywhere.

        Lower-ranked patterns are not tried once one matches.
        """
        for spec in self.field_patterns[field_name]:
            match = spec.compiled.search(text)
            if match:
                candidate = create_field_candidate(field_name, spec, match)
                logger.debug("Matched %s with pattern %s: %r", field_name, spec.name, candidate.value)
                return candidate
        return None

    def extract(self, text: str) -> RawFields:
        """
        Extract raw candidate strings for each field.

        Args:
            text: OCR-extracted text from receipt

        Returns:
            RawFields with None for fields that were not found
        """
        if not text or not isinstance(text, str):
            return RawFields()

        found = {}
        for field_name in ('merchant', 'date', 'total'):
            candidate = self.match_field(text, field_name)
            found[field_name] = candidate.value if candidate else None

        return RawFields(**found)

    def run(self, text: str) -> Draft:
        """
        Parse receipt text into a Draft.

        A field that cannot be matched, resolved or parsed is left empty;
        the other fields are still extracted. Never raises.

        Args:
            text: OCR-extracted text from receipt (empty if OCR failed)

        Returns:
            Draft for the expense form
        """
        raw = self.extract(text)

        receipt_date = None
        if raw.date is not None:
            receipt_date = resolve(raw.date)
            if receipt_date is None:
                logger.debug("Discarding invalid date %r", raw.date)

        total = None
        if raw.total is not None:
            total = to_amount(raw.total)
            if total is None:
                logger.debug("Discarding unparseable total %r", raw.total)

        tax = to_amount(raw.tax)

        return Draft(
            merchant=raw.merchant,
            date=receipt_date,
            total=total,
            tax=tax if tax is not None else ZERO,
        )


_default_parser = ReceiptParser()


def extract_draft(text: str) -> Draft:
    """Parse receipt text with the shared parser."""
    return _default_parser.run(text)
