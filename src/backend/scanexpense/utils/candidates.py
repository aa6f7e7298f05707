"""
Pattern and candidate types for field extraction.

Each field has an ordered list of patterns; every match becomes a
FieldCandidate carrying the rank of the pattern that produced it.
"""

from dataclasses import dataclass, field
from typing import Optional
import re


FIELD_NAMES = ('merchant', 'date', 'total', 'tax')


@dataclass(frozen=True)
class PatternSpec:
    """A named regex pattern with example and notes for documentation."""
    name: str
    pattern: str
    example: str
    rank: int
    notes: Optional[str] = None
    flags: int = 0  # Case-sensitive as authored
    compiled: re.Pattern = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, 'compiled', re.compile(self.pattern, self.flags))


@dataclass(frozen=True)
class FieldCandidate:
    """
    A substring matched by one pattern for one target field.

    rank is the pattern's position in its field's list (1 = most specific).
    """
    field: str
    value: str  # Captured substring
    rank: int
    pattern_name: str = ""
    match_span: tuple[int, int] = (0, 0)  # (start, end) character positions

    def __post_init__(self):
        if self.field not in FIELD_NAMES:
            raise ValueError(f"Unknown field: {self.field}")


def create_field_candidate(field_name: str, spec: PatternSpec, match: re.Match) -> FieldCandidate:
    """
    Create FieldCandidate from a pattern match.

    Uses the first capture group when the pattern has one, the whole match otherwise.
    """
    if match.groups():
        value = match.group(1)
        span = match.span(1)
    else:
        value = match.group(0)
        span = match.span(0)

    return FieldCandidate(
        field=field_name,
        value=value,
        rank=spec.rank,
        pattern_name=spec.name,
        match_span=span,
    )

