import pytest

from seedprep.payloads import (
    Bip39MnemonicPayload,
    DefaultPayload,
    ElectrumMnemonicPayload,
    MasterseedPayload,
    PAYLOAD_CLASSES,
    PasswordPayload,
    PubkeyPayload,
    Secret2FAPayload,
)
from seedprep.secret_types import RESERVED_TYPE_CODES, SecretType, is_code_allocated


@pytest.mark.parametrize(
    "secret_type, code",
    [
        (SecretType.DEFAULT_TYPE, 0x00),
        (SecretType.MASTERSEED, 0x10),
        (SecretType.BIP39_MNEMONIC, 0x30),
        (SecretType.ELECTRUM_MNEMONIC, 0x40),
        (SecretType.PUBKEY, 0x70),
        (SecretType.PASSWORD, 0x90),
        (SecretType.SECRET_2FA, 0xB0),
    ],
)
def test_type_codes_are_stable(secret_type: SecretType, code: int):
    assert int(secret_type) == code
    assert SecretType(code) is secret_type


def test_each_payload_variant_has_its_own_type():
    assert MasterseedPayload.secret_type is SecretType.MASTERSEED
    assert ElectrumMnemonicPayload.secret_type is SecretType.ELECTRUM_MNEMONIC
    assert Bip39MnemonicPayload.secret_type is SecretType.BIP39_MNEMONIC
    assert PubkeyPayload.secret_type is SecretType.PUBKEY
    assert Secret2FAPayload.secret_type is SecretType.SECRET_2FA
    assert PasswordPayload.secret_type is SecretType.PASSWORD
    assert DefaultPayload.secret_type is SecretType.DEFAULT_TYPE
    assert set(PAYLOAD_CLASSES) == set(SecretType)


def test_reserved_codes_do_not_overlap_secret_types():
    assert not set(RESERVED_TYPE_CODES) & {int(t) for t in SecretType}


@pytest.mark.parametrize("code", [0x00, 0x10, 0x50, 0x71, 0x90, 0xC1])
def test_is_code_allocated_for_deployed_codes(code: int):
    assert is_code_allocated(code)


@pytest.mark.parametrize("code", [0x20, 0x75, 0xFF])
def test_is_code_allocated_for_free_codes(code: int):
    assert not is_code_allocated(code)


def test_payloads_default_to_subtype_zero():
    payload = DefaultPayload(label="blob", data=b"\x01")
    assert payload.subtype == 0x00
