"""Repository adapters - Database implementations."""

from .postgres import EMAIL_UNIQUE_CONSTRAINT, PostgresAccountStore, run_migrations

__all__ = ["EMAIL_UNIQUE_CONSTRAINT", "PostgresAccountStore", "run_migrations"]
