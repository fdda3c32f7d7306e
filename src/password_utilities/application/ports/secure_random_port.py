"""Port for cryptographically secure randomness."""

from __future__ import annotations

from typing import Protocol


class SecureRandomPort(Protocol):
    """Secure random source contract."""

    def token_bytes(self, length: int) -> bytes:
        """Return `length` random bytes."""

    def randbelow(self, upper: int) -> int:
        """Return a uniformly distributed integer in `[0, upper)`."""
