"""
Credential hashing - bcrypt derivation and verification of passwords.

The stored string is bcrypt's modular crypt format
(``$2b$<cost>$<22-char salt><31-char digest>``), so algorithm, work factor
and salt travel with the digest and nothing else needs to be persisted.
"""

import logging
from dataclasses import dataclass

import bcrypt

from .exceptions import CredentialHashingError

logger = logging.getLogger(__name__)

DEFAULT_COST = 10
MIN_COST = 4
MAX_COST = 31

# bcrypt only consumes the first 72 bytes of its input
_BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


@dataclass(frozen=True)
class CredentialHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stateless apart from the work factor, safe to share across threads.
    """

    cost: int = DEFAULT_COST

    def __post_init__(self) -> None:
        if not MIN_COST <= self.cost <= MAX_COST:
            raise ValueError(f"bcrypt cost must be between {MIN_COST} and {MAX_COST}")

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt with a fresh salt.

        Raises:
            CredentialHashingError: bcrypt failed (e.g. salt generation)
        """
        try:
            salt = bcrypt.gensalt(rounds=self.cost)
            return bcrypt.hashpw(_password_bytes(password), salt).decode()
        except (ValueError, OSError) as exc:
            raise CredentialHashingError("password hashing failed") from exc

    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time check of a password against a stored bcrypt hash."""
        try:
            return bcrypt.checkpw(_password_bytes(password), password_hash.encode())
        except ValueError:
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False
