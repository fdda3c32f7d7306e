"""Transport encoding for salts and derived keys."""

from __future__ import annotations

import binascii


class InvalidHexEncodingError(ValueError):
    """Raised when a stored credential field is not a valid hex string."""

    def __init__(self, *, field_name: str) -> None:
        super().__init__(f"{field_name} is not a valid hex string")
        self.field_name = field_name


def encode_hex(raw: bytes) -> str:
    """Encode bytes as upper-case hex, two characters per byte."""

    return raw.hex().upper()


def decode_hex(encoded: str, *, field_name: str) -> bytes:
    """Decode a hex string of either case back to raw bytes."""

    try:
        return binascii.unhexlify(encoded)
    except (binascii.Error, ValueError) as exc:
        raise InvalidHexEncodingError(field_name=field_name) from exc
