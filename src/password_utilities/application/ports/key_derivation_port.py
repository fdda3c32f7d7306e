"""Port for iterated password-based key derivation."""

from __future__ import annotations

from typing import Protocol


class KeyDerivationPort(Protocol):
    """Key-derivation contract with selectable hash and iteration count."""

    def derive_key(
        self,
        *,
        password: bytes,
        salt: bytes,
        iterations: int,
        hash_name: str,
        key_length: int,
    ) -> bytes:
        """Derive `key_length` bytes from password and salt."""
