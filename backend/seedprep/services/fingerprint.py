"""
Fingerprint derivation
A fingerprint is the first few bytes of a digest of the encoded payload. It is
short on purpose: a match means "likely duplicate", not "certainly duplicate".
"""

from typing import Callable, Iterable, Optional

from seedprep.config import settings
from seedprep.logging_config import log_fingerprint_mismatch
from seedprep.payloads import Payload
from seedprep.services.encoding import encode
from seedprep.utils.crypto import constant_time_compare, sha256_digest

HashFunction = Callable[[bytes], bytes]


def fingerprint_bytes(
    data: bytes,
    hash_function: HashFunction = sha256_digest,
    length: Optional[int] = None,
) -> bytes:
    """Fingerprint already-encoded payload bytes"""
    if length is None:
        length = settings.FINGERPRINT_LENGTH
    digest = hash_function(data)
    if length < 1 or length > len(digest):
        raise ValueError(f"Fingerprint length must be between 1 and {len(digest)}")
    return digest[:length]


def fingerprint(
    payload: Payload,
    hash_function: HashFunction = sha256_digest,
    length: Optional[int] = None,
) -> bytes:
    """
    Derive the fingerprint of a payload.

    Pure function of encode(payload); raises FieldTooLarge exactly when
    encode does.
    """
    return fingerprint_bytes(encode(payload), hash_function, length)


def fingerprint_hex(
    payload: Payload,
    hash_function: HashFunction = sha256_digest,
    length: Optional[int] = None,
) -> str:
    return fingerprint(payload, hash_function, length).hex()


def is_likely_duplicate(candidate: bytes, known_fingerprints: Iterable[bytes]) -> bool:
    """Check a fingerprint against those of secrets already stored"""
    found = False
    for known in known_fingerprints:
        # No early exit, every known fingerprint is compared
        if constant_time_compare(candidate, known):
            found = True
    return found


def verify_fingerprint(
    data: bytes,
    expected: bytes,
    hash_function: HashFunction = sha256_digest,
) -> bool:
    """Integrity check for payload bytes retrieved from the card"""
    if not expected:
        return False
    actual = fingerprint_bytes(data, hash_function, len(expected))
    if constant_time_compare(actual, expected):
        return True
    log_fingerprint_mismatch(expected.hex())
    return False
