import pytest
from fastapi import HTTPException

from seedprep.utils.payload_validation import decode_hex_field


def test_decode_hex_field_accepts_mixed_case():
    assert decode_hex_field("00Ff10", field_name="data_hex", max_bytes=8) == b"\x00\xff\x10"


def test_decode_hex_field_rejects_invalid_hex():
    with pytest.raises(HTTPException) as exc:
        decode_hex_field("zz", field_name="data_hex", max_bytes=8)

    assert exc.value.status_code == 400
    assert exc.value.detail == "data_hex is not valid hex"


def test_decode_hex_field_rejects_odd_length():
    with pytest.raises(HTTPException) as exc:
        decode_hex_field("abc", field_name="data_hex", max_bytes=8)

    assert exc.value.detail == "data_hex is not valid hex"


def test_decode_hex_field_enforces_size_cap():
    with pytest.raises(HTTPException) as exc:
        decode_hex_field("00" * 9, field_name="fingerprint", max_bytes=8)

    assert exc.value.status_code == 400
    assert exc.value.detail == "fingerprint exceeds maximum size"


def test_decode_hex_field_enforces_exact_size():
    with pytest.raises(HTTPException) as exc:
        decode_hex_field("0011", field_name="fingerprint", max_bytes=8, exact_bytes=4)

    assert exc.value.detail == "fingerprint must decode to exactly 4 bytes"
