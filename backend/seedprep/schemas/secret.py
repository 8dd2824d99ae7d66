"""
Secret schemas - raw bytes travel as hex strings
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from seedprep.secret_types import SecretCreationMode, SecretType
from seedprep.security_limits import (
    MAX_LABEL_CHARS,
    MAX_REQUEST_FIELD_HEX_CHARS,
    MAX_REQUEST_TEXT_CHARS,
)


class SecretRequestBase(BaseModel):
    label: str = Field(..., min_length=1, max_length=MAX_LABEL_CHARS)
    mode: SecretCreationMode = SecretCreationMode.GENERATE


class RawSecretRequest(SecretRequestBase):
    """Masterseed, public key, 2FA secret or generic bytes"""
    kind: Literal["masterseed", "pubkey", "secret_2fa", "default"]
    data_hex: str = Field(..., max_length=MAX_REQUEST_FIELD_HEX_CHARS)


class MnemonicSecretRequest(SecretRequestBase):
    """Electrum or BIP39 mnemonic with optional passphrase"""
    kind: Literal["electrum_mnemonic", "bip39_mnemonic"]
    mnemonic: str = Field(..., min_length=1, max_length=MAX_REQUEST_TEXT_CHARS)
    passphrase: Optional[str] = Field(default=None, max_length=MAX_REQUEST_TEXT_CHARS)


class PasswordSecretRequest(SecretRequestBase):
    """Password with optional login and URL"""
    kind: Literal["password"]
    password: str = Field(..., min_length=1, max_length=MAX_REQUEST_TEXT_CHARS)
    login: Optional[str] = Field(default=None, max_length=MAX_REQUEST_TEXT_CHARS)
    url: Optional[str] = Field(default=None, max_length=MAX_REQUEST_TEXT_CHARS)


# Discriminated on "kind" by the router
SecretRequest = Union[RawSecretRequest, MnemonicSecretRequest, PasswordSecretRequest]


class PreparedSecretResponse(BaseModel):
    """Encoded secret, ready for the card transport"""
    secret_type: int
    subtype: int
    label: str
    type_name: str
    payload_hex: str
    fingerprint: str


class VerifyRequest(BaseModel):
    """Integrity check of payload bytes read back from the card"""
    secret_type: SecretType
    payload_hex: str = Field(..., max_length=MAX_REQUEST_FIELD_HEX_CHARS)
    fingerprint: str = Field(..., min_length=2, max_length=64)


class VerifyResponse(BaseModel):
    valid: bool
