"""
Registration domain service - the registration pipeline.

This module composes normalization, validation, hashing and persistence
into one request-scoped operation.

Pipeline (strict sequence, no branching back)
=============================================

    RECEIVED -> NORMALIZED -> VALIDATED -> HASHED -> PERSISTED

Terminal outcomes:
- Registered: account persisted
- ValidationFailure: raised by the validator, storage never touched
- Conflict: the store's email uniqueness constraint fired
- InternalFailure: hashing or storage malfunction, detail logged only

Note: uniqueness is never pre-checked here. Concurrent identical
submissions race on the database constraint; exactly one wins and every
other one receives Conflict.
"""

import logging
from dataclasses import dataclass

from .exceptions import (
    CredentialHashingError,
    DuplicateEmailError,
    InvalidRegistration,
    StorageError,
)
from .normalizer import normalize
from .outcomes import (
    Conflict,
    InternalFailure,
    PipelineStage,
    Registered,
    RegistrationOutcome,
    ValidationFailure,
)
from .ports import AccountStore, PasswordHasher, RegistrationInput
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Holds only its collaborators; every call to register() is independent,
    so one instance can serve concurrent requests.
    """

    store: AccountStore
    hasher: PasswordHasher

    def register(self, submission: RegistrationInput) -> RegistrationOutcome:
        """
        Run the registration pipeline once.

        Args:
            submission: Raw registration fields (will be normalized)

        Returns:
            Exactly one of Registered, ValidationFailure, Conflict,
            InternalFailure
        """
        normalized = normalize(submission)
        logger.debug("Registration stage: %s", PipelineStage.NORMALIZED.value)

        try:
            validated = validate(normalized)
        except InvalidRegistration as exc:
            logger.debug("Registration rejected: %s", exc.reason)
            return ValidationFailure(exc.reason)
        logger.debug("Registration stage: %s", PipelineStage.VALIDATED.value)

        try:
            password_hash = self.hasher.hash(validated.password)
        except CredentialHashingError:
            logger.exception("Password hashing failed")
            return InternalFailure(PipelineStage.HASHED)
        logger.debug("Registration stage: %s", PipelineStage.HASHED.value)

        try:
            account = self.store.insert(
                validated.first_name,
                validated.last_name,
                validated.email,
                password_hash,
            )
        except DuplicateEmailError as exc:
            logger.info("Registration conflict for %s", exc.email)
            return Conflict(exc.email)
        except StorageError:
            logger.exception("Account insert failed")
            return InternalFailure(PipelineStage.PERSISTED)

        logger.info("Registered account id=%s email=%s", account.id, account.email)
        return Registered(account)
