"""Application service for salted key-derivation hashing and verification."""

from __future__ import annotations

import logging

from cryptography.hazmat.primitives import constant_time

from password_utilities.application.dto.credential_models import (
    CredentialRecord,
    GenerationRequest,
    VerificationRequest,
)
from password_utilities.application.ports.key_derivation_port import KeyDerivationPort
from password_utilities.application.ports.secure_random_port import SecureRandomPort
from password_utilities.application.services.password_generator_service import (
    PasswordGeneratorService,
)
from password_utilities.domain.character_pools import DEFAULT_SPECIAL_CHARACTERS
from password_utilities.domain.hex_encoding import decode_hex, encode_hex

logger = logging.getLogger(__name__)

# Records carry no parameters, so these must never change for existing records to verify.
KEY_SIZE_BYTES = 128
ITERATIONS = 12_800
HASH_NAME = "sha512"


class MissingRequiredValueError(ValueError):
    """Raised when a required password, salt or hash value is absent."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__(f"{field_name} is required")
        self.field_name = field_name


class InvalidPasswordEncodingError(ValueError):
    """Raised when a password cannot be represented as UTF-8."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__(f"{field_name} is not valid UTF-8 text")
        self.field_name = field_name


class CredentialHasherService:
    """Derive persistable salt/hash records and verify candidates against them."""

    def __init__(
        self,
        *,
        generator: PasswordGeneratorService,
        random_source: SecureRandomPort,
        key_derivation: KeyDerivationPort,
    ) -> None:
        self._generator = generator
        self._random = random_source
        self._key_derivation = key_derivation

    def generate_hashed(
        self,
        length: int = 8,
        required_uppercase: int = 1,
        required_lowercase: int = 1,
        required_numeric: int = 1,
        required_special_char: int = 1,
        special_chars: str | None = DEFAULT_SPECIAL_CHARACTERS,
    ) -> CredentialRecord:
        """Generate a password and return only its derived record."""

        password = self._generator.generate(
            length,
            required_uppercase,
            required_lowercase,
            required_numeric,
            required_special_char,
            special_chars,
        )
        return self.hash_password(password)

    def generate_hashed_from_request(self, request: GenerationRequest) -> CredentialRecord:
        """Generate and hash a password described by a request model."""

        return self.hash_password(self._generator.generate_from_request(request))

    def hash_password(self, password: str | None) -> CredentialRecord:
        """Derive a record for `password` using a fresh random salt."""

        if password is None:
            raise MissingRequiredValueError(field_name="password")

        encoded = _encode_password(password)
        salt = self._random.token_bytes(KEY_SIZE_BYTES)
        derived = self._derive(password=encoded, salt=salt)
        logger.debug("credential_hashed key_size=%s iterations=%s", KEY_SIZE_BYTES, ITERATIONS)
        return CredentialRecord(salt=encode_hex(salt), hash=encode_hex(derived))

    def verify(self, request: VerificationRequest) -> bool:
        """Return whether the candidate password re-derives the stored hash."""

        password = _require_value(request.password, field_name="password")
        salt_hex = _require_value(request.salt, field_name="salt")
        hash_hex = _require_value(request.hash, field_name="hash")

        encoded = _encode_password(password)
        salt = decode_hex(salt_hex, field_name="salt")
        expected = decode_hex(hash_hex, field_name="hash")
        derived = self._derive(password=encoded, salt=salt)

        matched = constant_time.bytes_eq(derived, expected)
        logger.info("credential_verified matched=%s", matched)
        return matched

    def _derive(self, *, password: bytes, salt: bytes) -> bytes:
        return self._key_derivation.derive_key(
            password=password,
            salt=salt,
            iterations=ITERATIONS,
            hash_name=HASH_NAME,
            key_length=KEY_SIZE_BYTES,
        )


def _require_value(value: str | None, *, field_name: str) -> str:
    if value is None:
        raise MissingRequiredValueError(field_name=field_name)
    return value


def _encode_password(password: str) -> bytes:
    # Lone surrogates (e.g. from surrogateescape'd argv) have no UTF-8 form.
    try:
        return password.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidPasswordEncodingError(field_name="password") from exc
