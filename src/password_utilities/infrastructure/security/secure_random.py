"""Secure random source adapter backed by the operating system CSPRNG."""

from __future__ import annotations

import secrets

from password_utilities.application.ports.secure_random_port import SecureRandomPort


class SystemSecureRandom(SecureRandomPort):
    """Random source adapter using the `secrets` module."""

    def token_bytes(self, length: int) -> bytes:
        return secrets.token_bytes(length)

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)
