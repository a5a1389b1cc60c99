"""
Registration outcomes - closed result type of the registration pipeline.

Every pipeline run ends in exactly one of four variants:

    Registered         account persisted
    ValidationFailure  first violated input rule
    Conflict           email already registered
    InternalFailure    hashing or storage malfunction

The variants are disjoint by construction: which one is produced depends
only on the stage that terminated the run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .ports import AccountRecord

CONFLICT_MESSAGE = "email already exists"
INTERNAL_FAILURE_MESSAGE = "internal error"
REGISTERED_MESSAGE = "registered"


class OutcomeKind(str, Enum):
    """Discriminator shared by all outcome variants."""

    SUCCESS = "success"
    VALIDATION_FAILURE = "validation_failure"
    CONFLICT = "conflict"
    INTERNAL_FAILURE = "internal_failure"


class PipelineStage(str, Enum):
    """
    Stages of a single registration run, in execution order.

    RECEIVED -> NORMALIZED -> VALIDATED -> HASHED -> PERSISTED
    """

    RECEIVED = "received"
    NORMALIZED = "normalized"
    VALIDATED = "validated"
    HASHED = "hashed"
    PERSISTED = "persisted"


@dataclass(frozen=True)
class Registered:
    """Account created."""

    account: AccountRecord
    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS

    @property
    def message(self) -> str:
        return REGISTERED_MESSAGE


@dataclass(frozen=True)
class ValidationFailure:
    """Caller-fixable input problem."""

    reason: str
    kind: ClassVar[OutcomeKind] = OutcomeKind.VALIDATION_FAILURE

    @property
    def message(self) -> str:
        return self.reason


@dataclass(frozen=True)
class Conflict:
    """Email already registered. Not retryable without changing the email."""

    email: str
    kind: ClassVar[OutcomeKind] = OutcomeKind.CONFLICT

    @property
    def message(self) -> str:
        return CONFLICT_MESSAGE


@dataclass(frozen=True)
class InternalFailure:
    """Malfunction unrelated to caller input. Stage is for logs only."""

    stage: PipelineStage
    kind: ClassVar[OutcomeKind] = OutcomeKind.INTERNAL_FAILURE

    @property
    def message(self) -> str:
        return INTERNAL_FAILURE_MESSAGE


RegistrationOutcome = Union[Registered, ValidationFailure, Conflict, InternalFailure]
