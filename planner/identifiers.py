"""Task identifier validation."""

from __future__ import annotations

import re
from collections.abc import Iterable

from planner.errors import InvalidIdentifier

IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z]{1,20}$", re.IGNORECASE)


def is_valid_identifier(token: str) -> bool:
    """Return True when token is 1-20 letters."""
    return IDENTIFIER_PATTERN.fullmatch(token) is not None


def validate_identifiers(tokens: Iterable[str], line_number: int) -> None:
    """Raise InvalidIdentifier for the first token that fails the pattern."""
    for token in tokens:
        if not is_valid_identifier(token):
            raise InvalidIdentifier(token, line_number, IDENTIFIER_PATTERN.pattern)
