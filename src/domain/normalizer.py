"""Input normalization - first stage of the registration pipeline."""

from .ports import NormalizedInput, RegistrationInput


def normalize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def normalize(raw: RegistrationInput | NormalizedInput) -> NormalizedInput:
    """
    Canonicalize a registration submission.

    Names are trimmed and keep their case; email is trimmed and lowercased;
    the password is passed through untouched. Never fails, and applying it
    to an already normalized value changes nothing.
    """
    return NormalizedInput(
        first_name=raw.first_name.strip(),
        last_name=raw.last_name.strip(),
        email=normalize_email(raw.email),
        password=raw.password,
    )
