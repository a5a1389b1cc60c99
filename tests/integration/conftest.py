"""Integration fixtures: every test starts from an empty users table."""

import pytest


@pytest.fixture(autouse=True)
def _empty_users(clean_users: None) -> None:
    """Apply the shared clean_users fixture to every integration test."""
