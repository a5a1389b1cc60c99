"""
PostgreSQL account store adapter - Implements AccountStore protocol.

This module provides the PostgreSQL implementation of the domain's
store port using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The email column carries a UNIQUE constraint (``users_email_key``) and
that constraint is the only uniqueness check in the system. insert()
issues a single INSERT and never looks the email up first, so two
concurrent submissions for the same email cannot both succeed: the
loser's INSERT fails with SQLSTATE 23505 (UniqueViolation).

Duplicate detection is structural: the adapter matches psycopg's typed
UniqueViolation exception and the constraint name from the server's
error diagnostics, never the error message text.
"""

import logging
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg.rows import class_row
from psycopg_pool import ConnectionPool

from src.domain.exceptions import DuplicateEmailError, StorageError
from src.domain.ports import AccountRecord

logger = logging.getLogger(__name__)

EMAIL_UNIQUE_CONSTRAINT = "users_email_key"

_COLUMNS = "id, first_name, last_name, email, password_hash, created_at"


class PostgresAccountStore:
    """
    Implements AccountStore protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize store with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def insert(
        self, first_name: str, last_name: str, email: str, password_hash: str
    ) -> AccountRecord:
        """
        Atomically create one account row.

        The row is written by a single INSERT ... RETURNING in its own
        transaction: either the whole record is committed or nothing is.
        id and created_at are assigned by the database.

        Args:
            first_name: Normalized first name
            last_name: Normalized last name
            email: Normalized email address (lowercase, stripped)
            password_hash: bcrypt hash from the domain layer

        Returns:
            The persisted AccountRecord

        Raises:
            DuplicateEmailError: users_email_key rejected the row
            StorageError: Any other database or pool failure
        """
        sql = f"""
            INSERT INTO users (first_name, last_name, email, password_hash)
            VALUES (%s, %s, %s, %s)
            RETURNING {_COLUMNS}
        """

        try:
            with self._pool.connection() as conn:
                with conn.cursor(row_factory=class_row(AccountRecord)) as cursor:
                    cursor.execute(sql, (first_name, last_name, email, password_hash))
                    record = cursor.fetchone()
                conn.commit()
        except errors.UniqueViolation as exc:
            if exc.diag.constraint_name == EMAIL_UNIQUE_CONSTRAINT:
                raise DuplicateEmailError(email) from exc
            raise StorageError("account insert violated an unexpected constraint") from exc
        except (psycopg.Error, UnicodeEncodeError) as exc:
            raise StorageError("account insert failed") from exc

        if record is None:
            raise StorageError("account insert returned no row")
        return record

    def get_by_email(self, email: str) -> AccountRecord | None:
        """
        Fetch an account by normalized email.

        Not part of the registration pipeline; used for inspection and tests.

        Raises:
            StorageError: Database or pool failure
        """
        sql = f"SELECT {_COLUMNS} FROM users WHERE email = %s"

        try:
            with self._pool.connection() as conn:
                with conn.cursor(row_factory=class_row(AccountRecord)) as cursor:
                    cursor.execute(sql, (email,))
                    return cursor.fetchone()
        except psycopg.Error as exc:
            raise StorageError("account lookup failed") from exc

    def ping(self) -> None:
        """
        Validate database connectivity.

        Raises:
            StorageError: No working connection could be obtained
        """
        try:
            with self._pool.connection() as conn:
                conn.execute("SELECT 1")
        except psycopg.Error as exc:
            raise StorageError("database unavailable") from exc


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
