"""
Unit tests for input normalization.

Tests verify:
- Whitespace trimming on every text field
- Email lowercasing, names keep case
- Password passes through untouched
- Normalization is a fixed point
"""

import pytest

from src.domain.normalizer import normalize, normalize_email
from src.domain.ports import NormalizedInput, RegistrationInput


class TestNormalizeEmail:
    """Tests for email normalization."""

    def test_strips_whitespace(self) -> None:
        """Email normalization removes leading/trailing whitespace."""
        assert normalize_email("  user@example.com  ") == "user@example.com"

    def test_lowercases(self) -> None:
        """Email normalization converts to lowercase."""
        assert normalize_email("USER@EXAMPLE.COM") == "user@example.com"

    def test_combined(self) -> None:
        """Email normalization applies strip + lowercase together."""
        assert normalize_email(" John@Example.com ") == "john@example.com"

    def test_inner_whitespace_kept(self) -> None:
        """Only surrounding whitespace is removed; the validator rejects the rest."""
        assert normalize_email(" a b@example.com ") == "a b@example.com"


class TestNormalize:
    """Tests for full-input normalization."""

    def test_trims_names_and_keeps_case(self) -> None:
        """Names are trimmed but not case-folded."""
        result = normalize(RegistrationInput(" John ", " McDoe\t", "j@example.com", "Aa123456"))
        assert result.first_name == "John"
        assert result.last_name == "McDoe"

    def test_end_to_end_example(self) -> None:
        """Documented example normalizes as expected."""
        result = normalize(
            RegistrationInput(" John ", " Doe", " John@Example.com ", "Aa123456")
        )
        assert result == NormalizedInput("John", "Doe", "john@example.com", "Aa123456")

    def test_password_untouched(self) -> None:
        """Password whitespace and case are preserved."""
        result = normalize(RegistrationInput("John", "Doe", "j@example.com", "  Aa123456 "))
        assert result.password == "  Aa123456 "

    def test_empty_fields_do_not_fail(self) -> None:
        """Normalization is total: empty fields stay empty."""
        result = normalize(RegistrationInput("", "   ", "", ""))
        assert result == NormalizedInput("", "", "", "")

    @pytest.mark.parametrize(
        "raw",
        [
            RegistrationInput(" John ", " Doe", " John@Example.com ", "Aa123456"),
            RegistrationInput("ann", "LEE ", "ANN@X.IO", "pw"),
            RegistrationInput("", "", "", ""),
        ],
    )
    def test_idempotent(self, raw: RegistrationInput) -> None:
        """Normalizing an already normalized value changes nothing."""
        once = normalize(raw)
        assert normalize(once) == once

    def test_returns_normalized_input(self) -> None:
        """Result type is NormalizedInput."""
        result = normalize(RegistrationInput("John", "Doe", "j@example.com", "Aa123456"))
        assert isinstance(result, NormalizedInput)

    def test_password_not_in_repr(self) -> None:
        """Plaintext password never appears in repr (and so not in logs)."""
        result = normalize(RegistrationInput("John", "Doe", "j@example.com", "Secret123"))
        assert "Secret123" not in repr(result)
