from __future__ import annotations

import pytest

from password_utilities.domain.hex_encoding import InvalidHexEncodingError, decode_hex, encode_hex


def test_encode_hex_is_upper_case_two_chars_per_byte() -> None:
    encoded = encode_hex(bytes([0x00, 0x0F, 0xAB, 0xFF]))

    assert encoded == "000FABFF"


def test_decode_then_encode_reproduces_encoded_value() -> None:
    raw = bytes(range(256))[:128]
    encoded = encode_hex(raw)

    assert len(encoded) == 256
    assert encode_hex(decode_hex(encoded, field_name="salt")) == encoded


def test_decode_hex_is_case_insensitive() -> None:
    assert decode_hex("abCD", field_name="hash") == bytes([0xAB, 0xCD])


@pytest.mark.parametrize("encoded", ["abc", "zz", "AB CD", "é0"])
def test_decode_hex_rejects_invalid_values(encoded: str) -> None:
    with pytest.raises(InvalidHexEncodingError) as error_info:
        decode_hex(encoded, field_name="salt")

    assert error_info.value.field_name == "salt"
    assert "salt" in str(error_info.value)
