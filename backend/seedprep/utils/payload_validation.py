"""
Validation helpers for hex-encoded payload fields.
"""

from typing import Optional

from fastapi import HTTPException, status

from seedprep.security_limits import hex_max_length


def decode_hex_field(
    value: str,
    *,
    field_name: str,
    max_bytes: int,
    exact_bytes: Optional[int] = None,
) -> bytes:
    """
    Decode and validate a hex field with size caps.

    Raises:
      HTTPException(400) for invalid encoding or size violations.
    """
    max_chars = hex_max_length(max_bytes)
    if len(value) > max_chars:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} exceeds maximum size",
        )

    try:
        decoded = bytes.fromhex(value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} is not valid hex",
        )

    if exact_bytes is not None and len(decoded) != exact_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} must decode to exactly {exact_bytes} bytes",
        )

    return decoded
