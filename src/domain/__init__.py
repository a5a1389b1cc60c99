"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration pipeline: normalization,
validation, credential hashing and the orchestrating service. It defines
its own port interfaces for infrastructure abstraction, so storage
adapters plug in without the domain knowing about them.
"""

from .credentials import CredentialHasher
from .exceptions import (
    CredentialHashingError,
    DuplicateEmailError,
    InvalidRegistration,
    RegistrationError,
    StorageError,
)
from .normalizer import normalize
from .outcomes import (
    Conflict,
    InternalFailure,
    OutcomeKind,
    PipelineStage,
    Registered,
    RegistrationOutcome,
    ValidationFailure,
)
from .ports import (
    AccountRecord,
    AccountStore,
    NormalizedInput,
    PasswordHasher,
    RegistrationInput,
    ValidatedInput,
)
from .registration import RegistrationService
from .validator import validate

__all__ = [
    "AccountRecord",
    "AccountStore",
    "Conflict",
    "CredentialHasher",
    "CredentialHashingError",
    "DuplicateEmailError",
    "InternalFailure",
    "InvalidRegistration",
    "NormalizedInput",
    "OutcomeKind",
    "PasswordHasher",
    "PipelineStage",
    "Registered",
    "RegistrationError",
    "RegistrationInput",
    "RegistrationOutcome",
    "RegistrationService",
    "StorageError",
    "ValidatedInput",
    "ValidationFailure",
    "normalize",
    "validate",
]
