"""
Shared fixtures for adversarial tests.

Provides a thread-safe in-memory account store whose insert behaves like
a table with a UNIQUE(email) constraint, so races can be exercised without
a database. PostgreSQL-backed races use the shared ``pool`` fixture.
"""

import threading
from datetime import datetime, timezone

import pytest

from src.domain.exceptions import DuplicateEmailError
from src.domain.ports import AccountRecord


class InMemoryAccountStore:
    """Dict-backed AccountStore; the lock plays the role of the unique index."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rows: dict[str, AccountRecord] = {}
        self._next_id = 1

    def insert(
        self, first_name: str, last_name: str, email: str, password_hash: str
    ) -> AccountRecord:
        with self._lock:
            if email in self._rows:
                raise DuplicateEmailError(email)
            record = AccountRecord(
                id=self._next_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
                created_at=datetime.now(timezone.utc),
            )
            self._rows[email] = record
            self._next_id += 1
            return record

    def rows(self) -> list[AccountRecord]:
        with self._lock:
            return list(self._rows.values())


@pytest.fixture
def memory_store() -> InMemoryAccountStore:
    return InMemoryAccountStore()
