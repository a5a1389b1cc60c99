"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Database connection pool (skips the test when PostgreSQL is unreachable)
- Registration input factory
"""

from collections.abc import Callable, Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.ports import RegistrationInput


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """Connection pool against the configured database, with migrations applied."""
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.conninfo,
        min_size=1,
        max_size=10,
        open=False,
    )
    try:
        pool.open(wait=True, timeout=5.0)
    except PoolTimeout:
        pool.close()
        pytest.skip("PostgreSQL is not reachable")

    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_users(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty the users table before a test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM users")
        conn.commit()
    yield


@pytest.fixture
def make_input() -> Callable[..., RegistrationInput]:
    """Factory for valid registration input, with per-field overrides."""

    def _make(**overrides: str) -> RegistrationInput:
        fields = {
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@example.com",
            "password": "Aa123456",
        }
        fields.update(overrides)
        return RegistrationInput(**fields)

    return _make
