"""Pydantic models for password generation, hashing and verification."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from password_utilities.domain.character_pools import DEFAULT_SPECIAL_CHARACTERS

NonNegativeCount = Annotated[int, Field(ge=0)]


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class GenerationRequest(StrictModel):
    """Caller-constructed password generation parameters.

    Length bounds and the required-count total are enforced by the generator so
    callers receive the dedicated length errors rather than a validation error.
    """

    length: int = 8
    required_uppercase: NonNegativeCount = 1
    required_lowercase: NonNegativeCount = 1
    required_numeric: NonNegativeCount = 1
    required_special_char: NonNegativeCount = 1
    special_chars: str | None = DEFAULT_SPECIAL_CHARACTERS


class CredentialRecord(StrictModel):
    """Salt and derived key pair, hex-encoded for persistence."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    salt: str = Field(pattern=r"^[0-9A-Fa-f]+$")
    hash: str = Field(pattern=r"^[0-9A-Fa-f]+$")


class VerificationRequest(StrictModel):
    """Candidate password plus the stored record to check it against."""

    password: str | None = None
    salt: str | None = None
    hash: str | None = None

    @classmethod
    def for_record(cls, *, password: str | None, record: CredentialRecord) -> VerificationRequest:
        """Build a verification request from a previously derived record."""

        return cls(password=password, salt=record.salt, hash=record.hash)
