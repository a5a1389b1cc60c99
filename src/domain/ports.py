"""
Port interfaces - Protocol definitions and value types for the registration pipeline.

This module defines the interfaces (ports) that the domain requires
from infrastructure, and the immutable values that flow between
pipeline stages. Adapters implement these protocols.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class RegistrationInput:
    """Raw registration submission, exactly as received."""

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class NormalizedInput:
    """Registration input after trimming and email case-folding."""

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ValidatedInput:
    """Normalized input that passed every validation rule."""

    first_name: str
    last_name: str
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class AccountRecord:
    """Durable account row as returned by the store."""

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str = field(repr=False)
    created_at: datetime


class AccountStore(Protocol):
    """Port interface for account persistence."""

    def insert(
        self, first_name: str, last_name: str, email: str, password_hash: str
    ) -> AccountRecord:
        """
        Atomically create one account under the email uniqueness constraint.

        Args:
            first_name: Normalized first name
            last_name: Normalized last name
            email: Normalized email address
            password_hash: bcrypt hash of the password

        Returns:
            The persisted AccountRecord, with store-assigned id and created_at

        Raises:
            DuplicateEmailError: The uniqueness constraint on email fired
            StorageError: Any other storage failure
        """
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way password derivation."""

    def hash(self, password: str) -> str:
        """
        Derive a salted one-way hash of the password.

        Raises:
            CredentialHashingError: Hashing failed
        """
        ...

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash."""
        ...
