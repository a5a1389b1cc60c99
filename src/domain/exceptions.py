"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Each exception maps to exactly one registration outcome.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class InvalidRegistration(RegistrationError):
    """Input violates a validation rule. Carries the first violated rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class DuplicateEmailError(RegistrationError):
    """Email is already registered (store uniqueness constraint fired)."""

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email


class CredentialHashingError(RegistrationError):
    """Password hashing failed for reasons unrelated to the input."""

    pass


class StorageError(RegistrationError):
    """Account storage failed (connectivity, timeout, schema mismatch)."""

    pass
