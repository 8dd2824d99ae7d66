import hashlib
import logging

import pytest

from seedprep.errors import FieldTooLarge
from seedprep.payloads import MasterseedPayload, PasswordPayload
from seedprep.secret_types import SecretCreationMode, SecretType
from seedprep.services.preparation import prepare_secret
from seedprep.services.telemetry import get_counters_snapshot


def test_prepare_secret_bundles_header_fields(password_payload):
    prepared = prepare_secret(password_payload)

    assert prepared.secret_type is SecretType.PASSWORD
    assert prepared.subtype == 0x00
    assert prepared.label == "site"
    assert prepared.payload == b"\x04Ab1!\x04user"
    assert prepared.fingerprint == hashlib.sha256(prepared.payload).digest()[:4]


def test_prepare_secret_counts_by_creation_mode(password_payload):
    prepare_secret(password_payload)
    prepare_secret(password_payload, SecretCreationMode.MANUAL_IMPORT)

    counters = get_counters_snapshot()
    assert counters["secret_prepared_total"] == 2
    assert counters["secret_prepared_generate_total"] == 1
    assert counters["secret_prepared_manual_import_total"] == 1


def test_prepare_secret_propagates_field_too_large():
    payload = MasterseedPayload(label="seed", masterseed=b"\x00" * 256)

    with pytest.raises(FieldTooLarge):
        prepare_secret(payload)

    counters = get_counters_snapshot()
    assert counters["secret_prepare_failures_total"] == 1
    assert "secret_prepared_total" not in counters


def test_prepare_secret_logs_without_content(caplog):
    payload = PasswordPayload(label="bank", password="correct-horse-battery")

    with caplog.at_level(logging.INFO, logger="seedprep.security"):
        prepared = prepare_secret(payload)

    assert "Prepared Password payload" in caplog.text
    assert prepared.fingerprint.hex() in caplog.text
    assert "correct-horse-battery" not in caplog.text
