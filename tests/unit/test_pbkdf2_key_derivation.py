from __future__ import annotations

import hashlib

import pytest

from password_utilities.infrastructure.security.pbkdf2_key_derivation import (
    Pbkdf2KeyDerivation,
    UnsupportedHashAlgorithmError,
)
from password_utilities.infrastructure.security.secure_random import SystemSecureRandom


@pytest.mark.parametrize("hash_name", ["sha256", "sha512", "SHA512"])
def test_derive_key_matches_reference_pbkdf2(hash_name: str) -> None:
    derived = Pbkdf2KeyDerivation().derive_key(
        password=b"password",
        salt=b"salt-bytes",
        iterations=1_000,
        hash_name=hash_name,
        key_length=128,
    )

    expected = hashlib.pbkdf2_hmac(hash_name.lower(), b"password", b"salt-bytes", 1_000, dklen=128)
    assert derived == expected


def test_derive_key_rejects_unknown_hash() -> None:
    with pytest.raises(UnsupportedHashAlgorithmError) as error_info:
        Pbkdf2KeyDerivation().derive_key(
            password=b"password",
            salt=b"salt",
            iterations=1,
            hash_name="md5",
            key_length=16,
        )

    assert error_info.value.hash_name == "md5"


def test_system_secure_random_returns_requested_sizes() -> None:
    random_source = SystemSecureRandom()

    assert len(random_source.token_bytes(128)) == 128
    assert random_source.token_bytes(32) != random_source.token_bytes(32)
    assert all(0 <= random_source.randbelow(8) < 8 for _ in range(500))
