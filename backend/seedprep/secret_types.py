"""
Secret type taxonomy
Codes are persisted on the secure element and select its decoder - never reuse one
"""

from enum import Enum, IntEnum
from typing import Dict


class SecretType(IntEnum):
    """Secret kinds this service can encode, with their one-byte type codes"""

    DEFAULT_TYPE = 0x00
    MASTERSEED = 0x10
    BIP39_MNEMONIC = 0x30
    ELECTRUM_MNEMONIC = 0x40
    PUBKEY = 0x70
    PASSWORD = 0x90
    SECRET_2FA = 0xB0


# Codes allocated on the secure element for kinds without a payload here.
RESERVED_TYPE_CODES: Dict[int, str] = {
    0x50: "shamir_secret_share",
    0x60: "privkey",
    0x71: "pubkey_authenticated",
    0x80: "key",
    0x91: "master_password",
    0xA0: "certificate",
    0xC0: "data",
    0xC1: "wallet_descriptor",
}

DEFAULT_SUBTYPE = 0x00


class SecretCreationMode(str, Enum):
    """How the secret material was obtained"""

    GENERATE = "generate"
    MANUAL_IMPORT = "manual_import"


def is_code_allocated(code: int) -> bool:
    """Check whether a type code is already taken by a deployed secret kind"""
    if code in RESERVED_TYPE_CODES:
        return True
    return code in SecretType._value2member_map_
