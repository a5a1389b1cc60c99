"""
Input validation - ordered policy checks over normalized input.

Rules run in a fixed order and the first failing rule wins, so the same
input always yields the same reason:

1. first_name at least 2 characters
2. last_name at least 2 characters
3. email shaped like local@domain.tld, no whitespace, one "@"
4. password at least 8 characters with an upper, a lower and a digit

Reason strings are part of the public API contract.
"""

import re
from functools import lru_cache

from .exceptions import InvalidRegistration
from .ports import NormalizedInput, ValidatedInput

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8

FIRST_NAME_TOO_SHORT = "first_name too short"
LAST_NAME_TOO_SHORT = "last_name too short"
INVALID_EMAIL = "invalid email"
WEAK_PASSWORD = "weak password (8+, upper, lower, digit)"


@lru_cache
def _email_pattern() -> re.Pattern[str]:
    return re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@lru_cache
def _password_classes() -> tuple[re.Pattern[str], ...]:
    # ASCII classes only: upper, lower, decimal digit
    return (re.compile(r"[A-Z]"), re.compile(r"[a-z]"), re.compile(r"[0-9]"))


def email_is_valid(email: str) -> bool:
    """Check the general address shape. Expects an already normalized email."""
    return _email_pattern().fullmatch(email) is not None


def password_is_strong(password: str) -> bool:
    """Password: at least 8 chars, 1 uppercase, 1 lowercase, 1 digit."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return False
    return all(pattern.search(password) for pattern in _password_classes())


def validate(data: NormalizedInput) -> ValidatedInput:
    """
    Apply validation rules in order, stopping at the first failure.

    Args:
        data: Normalized registration input

    Returns:
        ValidatedInput with the same field values

    Raises:
        InvalidRegistration: With the reason of the first violated rule
    """
    if len(data.first_name) < MIN_NAME_LENGTH:
        raise InvalidRegistration(FIRST_NAME_TOO_SHORT)
    if len(data.last_name) < MIN_NAME_LENGTH:
        raise InvalidRegistration(LAST_NAME_TOO_SHORT)
    if not email_is_valid(data.email):
        raise InvalidRegistration(INVALID_EMAIL)
    if not password_is_strong(data.password):
        raise InvalidRegistration(WEAK_PASSWORD)

    return ValidatedInput(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        password=data.password,
    )
