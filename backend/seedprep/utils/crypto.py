"""
Cryptographic utilities with timing attack prevention
"""

import hmac
import hashlib


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings in constant time
    Prevents timing attacks on fingerprint comparison
    """
    if len(a) != len(b):
        # Still do comparison to maintain constant time
        # but ensure we return False
        hmac.compare_digest(a, a)
        return False

    return hmac.compare_digest(a, b)


def sha256_digest(data: bytes) -> bytes:
    """Compute the raw SHA-256 digest of data"""
    return hashlib.sha256(data).digest()


def normalize_words(words: str) -> str:
    """
    Normalize a word phrase for validation
    - lowercase
    - trimmed
    - single spaces between words
    """
    word_list = words.lower().split()
    return ' '.join(word.strip() for word in word_list)
