"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator

# Lone UTF-16 surrogates survive json.loads ("\ud800") but cannot be encoded as UTF-8
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")
REPLACEMENT_CHARACTER = "\ufffd"


class RegisterRequest(BaseModel):
    """
    Request model for user registration.

    Fields are strict strings so a non-string value is a malformed body.
    Absent fields default to "" and are rejected by the domain validator.
    """

    first_name: StrictStr = Field(default="", description="Given name (min 2 characters)")
    last_name: StrictStr = Field(default="", description="Family name (min 2 characters)")
    email: StrictStr = Field(default="", description="Email address, stored lowercased")
    password: StrictStr = Field(
        default="",
        description="Password: 8+ characters with an uppercase, a lowercase and a digit",
    )

    @field_validator("first_name", "last_name", "email", "password", mode="before")
    @classmethod
    def replace_lone_surrogates(cls, value: Any) -> Any:
        """Replace unpaired surrogates with U+FFFD so every field is valid UTF-8."""
        if isinstance(value, str):
            return _LONE_SURROGATE.sub(REPLACEMENT_CHARACTER, value)
        return value


class APIResponse(BaseModel):
    """Response envelope used for every registration response."""

    ok: bool
    message: str
