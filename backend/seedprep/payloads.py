"""
Secret payload variants
A payload holds the content of one secret before it is encoded for the card.
The label travels alongside the payload and is never part of its bytes.
"""

from typing import ClassVar, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from seedprep.secret_types import DEFAULT_SUBTYPE, SecretType


class BasePayload(BaseModel):
    """Fields shared by every payload variant"""

    model_config = ConfigDict(frozen=True)

    secret_type: ClassVar[SecretType]

    label: str
    subtype: int = Field(default=DEFAULT_SUBTYPE, ge=0, le=0xFF)


class MasterseedPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.MASTERSEED

    masterseed: bytes


class ElectrumMnemonicPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.ELECTRUM_MNEMONIC

    mnemonic: str
    passphrase: Optional[str] = None


class Bip39MnemonicPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.BIP39_MNEMONIC

    mnemonic: str
    passphrase: Optional[str] = None


class PubkeyPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.PUBKEY

    pubkey: bytes


class Secret2FAPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.SECRET_2FA

    secret: bytes


class PasswordPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.PASSWORD

    password: str
    login: Optional[str] = None
    url: Optional[str] = None


class DefaultPayload(BasePayload):
    secret_type: ClassVar[SecretType] = SecretType.DEFAULT_TYPE

    data: bytes


Payload = Union[
    MasterseedPayload,
    ElectrumMnemonicPayload,
    Bip39MnemonicPayload,
    PubkeyPayload,
    Secret2FAPayload,
    PasswordPayload,
    DefaultPayload,
]

PAYLOAD_CLASSES = {
    cls.secret_type: cls
    for cls in (
        MasterseedPayload,
        ElectrumMnemonicPayload,
        Bip39MnemonicPayload,
        PubkeyPayload,
        Secret2FAPayload,
        PasswordPayload,
        DefaultPayload,
    )
}
