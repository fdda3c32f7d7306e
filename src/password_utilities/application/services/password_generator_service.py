"""Application service for constrained random password generation."""

from __future__ import annotations

import logging

from password_utilities.application.dto.credential_models import GenerationRequest
from password_utilities.application.ports.secure_random_port import SecureRandomPort
from password_utilities.domain.character_pools import (
    DEFAULT_SPECIAL_CHARACTERS,
    LOWERCASE_POOL,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    NUMERIC_POOL,
    UPPERCASE_POOL,
    combined_pool,
)

logger = logging.getLogger(__name__)


class InvalidPasswordLengthError(ValueError):
    """Raised when the requested length falls outside the supported range."""

    def __init__(self, *, length: int) -> None:
        super().__init__(
            f"password length must be between {MIN_PASSWORD_LENGTH} and "
            f"{MAX_PASSWORD_LENGTH} characters, got {length}"
        )
        self.length = length
        self.minimum = MIN_PASSWORD_LENGTH
        self.maximum = MAX_PASSWORD_LENGTH


class InsufficientPasswordLengthError(ValueError):
    """Raised when the requested length cannot hold every required character."""

    def __init__(self, *, length: int, total_required: int) -> None:
        super().__init__(f"password length must be at least {total_required}, got {length}")
        self.length = length
        self.total_required = total_required


class NegativeRequiredCountError(ValueError):
    """Raised when one per-class minimum is below zero."""

    def __init__(self, *, name: str, value: int) -> None:
        super().__init__(f"{name} cannot be negative, got {value}")
        self.name = name
        self.value = value


class PasswordGeneratorService:
    """Generate passwords that satisfy per-class minimum counts."""

    def __init__(self, *, random_source: SecureRandomPort) -> None:
        self._random = random_source

    def generate(
        self,
        length: int = 8,
        required_uppercase: int = 1,
        required_lowercase: int = 1,
        required_numeric: int = 1,
        required_special_char: int = 1,
        special_chars: str | None = DEFAULT_SPECIAL_CHARACTERS,
    ) -> str:
        """Return a random password of `length` characters meeting every minimum."""

        _require_non_negative(
            required_uppercase=required_uppercase,
            required_lowercase=required_lowercase,
            required_numeric=required_numeric,
            required_special_char=required_special_char,
        )
        total_required = (
            required_uppercase + required_lowercase + required_numeric + required_special_char
        )
        if length < MIN_PASSWORD_LENGTH or length > MAX_PASSWORD_LENGTH:
            raise InvalidPasswordLengthError(length=length)
        if length < total_required:
            raise InsufficientPasswordLengthError(length=length, total_required=total_required)

        if not special_chars:
            special_chars = ""
            required_special_char = 0

        buffer: list[str] = []
        for pool, count in (
            (UPPERCASE_POOL, required_uppercase),
            (LOWERCASE_POOL, required_lowercase),
            (NUMERIC_POOL, required_numeric),
            (special_chars, required_special_char),
        ):
            buffer.extend(self._draw(pool) for _ in range(count))

        fill_pool = combined_pool(special_chars=special_chars)
        buffer.extend(self._draw(fill_pool) for _ in range(len(buffer), length))

        self._shuffle(buffer)
        logger.debug(
            "password_generated length=%s required=%s special_pool_size=%s",
            length,
            total_required,
            len(special_chars),
        )
        return "".join(buffer)

    def generate_from_request(self, request: GenerationRequest) -> str:
        """Generate a password from a validated request model."""

        return self.generate(
            request.length,
            request.required_uppercase,
            request.required_lowercase,
            request.required_numeric,
            request.required_special_char,
            request.special_chars,
        )

    def _draw(self, pool: str) -> str:
        """Return one character drawn uniformly from `pool`."""

        return pool[self._random.randbelow(len(pool))]

    def _shuffle(self, buffer: list[str]) -> None:
        """Permute `buffer` in place with a Fisher-Yates pass over the secure source."""

        for index in range(len(buffer) - 1, 0, -1):
            swap_index = self._random.randbelow(index + 1)
            buffer[index], buffer[swap_index] = buffer[swap_index], buffer[index]


def _require_non_negative(**counts: int) -> None:
    for name, value in counts.items():
        if value < 0:
            raise NegativeRequiredCountError(name=name, value=value)
