"""
Logging configuration
Secret events are logged but never include secret content
"""

import logging
import sys
from typing import Set

REDACTED_MESSAGE = "[REDACTED - Sensitive data filtered]"


class SecretRedactionFilter(logging.Filter):
    """Filter that redacts sensitive information"""

    SENSITIVE_KEYS: Set[str] = {
        "password",
        "mnemonic",
        "passphrase",
        "seed",
        "secret",
        "key",
        "words",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        # Ensure we never log sensitive data
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    # Likely contains sensitive value assignment
                    record.msg = REDACTED_MESSAGE
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO"):
    """Configure application logging"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretRedactionFilter())

    # Root logger
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# Secret event logger
security_logger = logging.getLogger("seedprep.security")


def log_secret_prepared(type_name: str, size: int, fingerprint_hex: str, mode: str):
    """Log a prepared payload (no secret content)"""
    security_logger.info(f"Prepared {type_name} payload ({size} bytes, fp {fingerprint_hex}, {mode})")


def log_field_too_large(type_name: str, field_name: str, size: int):
    """Log an oversized payload field"""
    security_logger.warning(f"Rejected {type_name} payload: {field_name} is {size} bytes")


def log_password_generated(mode: str, length: int):
    """Log password generation (never the password itself)"""
    security_logger.info(f"Generated {mode} password of length {length}")


def log_dictionary_unavailable(source: str):
    """Log a missing or empty word dictionary"""
    security_logger.error(f"Word dictionary unavailable: {source}")


def log_fingerprint_mismatch(expected_hex: str):
    """Log a failed integrity check"""
    security_logger.warning(f"Fingerprint mismatch, expected {expected_hex}")
