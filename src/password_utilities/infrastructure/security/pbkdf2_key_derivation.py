"""PBKDF2-HMAC key derivation adapter."""

from __future__ import annotations

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from password_utilities.application.ports.key_derivation_port import KeyDerivationPort

# The hasher only asks for sha512; the others back the port's selectable-hash contract.
_HASH_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


class UnsupportedHashAlgorithmError(ValueError):
    """Raised when a key derivation is requested with an unknown hash name."""

    def __init__(self, *, hash_name: str) -> None:
        super().__init__(f"unsupported hash algorithm: {hash_name}")
        self.hash_name = hash_name


class Pbkdf2KeyDerivation(KeyDerivationPort):
    """Key derivation adapter using `cryptography`'s PBKDF2HMAC."""

    def derive_key(
        self,
        *,
        password: bytes,
        salt: bytes,
        iterations: int,
        hash_name: str,
        key_length: int,
    ) -> bytes:
        algorithm = _HASH_ALGORITHMS.get(hash_name.lower())
        if algorithm is None:
            raise UnsupportedHashAlgorithmError(hash_name=hash_name)

        kdf = PBKDF2HMAC(
            algorithm=algorithm(),
            length=key_length,
            salt=salt,
            iterations=iterations,
        )
        return kdf.derive(password)
