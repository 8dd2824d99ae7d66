"""
Size limits shared by the encoder, the generators and the HTTP schemas.
"""

# Every TLV field is prefixed with a single unsigned byte.
MAX_FIELD_BYTES = 255

# Fingerprints are a prefix of a SHA-256 digest.
DEFAULT_FINGERPRINT_LENGTH = 4
MAX_FINGERPRINT_LENGTH = 32

# A generated password must still fit one TLV field in character mode.
MIN_PASSWORD_LENGTH = 1
MAX_PASSWORD_LENGTH = MAX_FIELD_BYTES

# Labels travel in the transport header, outside the payload.
MAX_LABEL_CHARS = 127


def hex_max_length(byte_limit: int) -> int:
    """Return the hex string length for byte_limit bytes."""
    return byte_limit * 2


# Request-side cap; the encoder enforces MAX_FIELD_BYTES with FieldTooLarge.
MAX_REQUEST_FIELD_BYTES = 4 * 1024
MAX_REQUEST_FIELD_HEX_CHARS = hex_max_length(MAX_REQUEST_FIELD_BYTES)
MAX_REQUEST_TEXT_CHARS = MAX_REQUEST_FIELD_BYTES
