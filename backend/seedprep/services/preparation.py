"""
Secret preparation
Bundles everything the card transport needs to import one secret.
"""

from seedprep.logging_config import log_secret_prepared
from seedprep.payloads import Payload
from seedprep.secret_types import SecretCreationMode, SecretType
from seedprep.services.encoding import encode, type_name
from seedprep.services.fingerprint import fingerprint_bytes
from seedprep.services.telemetry import increment_counter


class PreparedSecret:
    """Encoded secret ready for the card transport"""

    def __init__(self, secret_type: SecretType, subtype: int, label: str, payload: bytes, fingerprint: bytes):
        self.secret_type = secret_type
        self.subtype = subtype
        self.label = label
        self.payload = payload
        self.fingerprint = fingerprint


def prepare_secret(
    payload: Payload,
    mode: SecretCreationMode = SecretCreationMode.GENERATE,
) -> PreparedSecret:
    """Encode and fingerprint a payload; FieldTooLarge propagates"""
    try:
        encoded = encode(payload)
    except ValueError:
        increment_counter("secret_prepare_failures_total")
        raise

    prepared = PreparedSecret(
        secret_type=payload.secret_type,
        subtype=payload.subtype,
        label=payload.label,
        payload=encoded,
        fingerprint=fingerprint_bytes(encoded),
    )

    log_secret_prepared(type_name(payload), len(encoded), prepared.fingerprint.hex(), mode.value)
    increment_counter("secret_prepared_total")
    increment_counter(f"secret_prepared_{mode.value}_total")
    return prepared
