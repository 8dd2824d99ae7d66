# Seedprep Pydantic Schemas
from seedprep.schemas.secret import (
    MnemonicSecretRequest,
    PasswordSecretRequest,
    PreparedSecretResponse,
    RawSecretRequest,
    SecretRequest,
    VerifyRequest,
    VerifyResponse,
)
from seedprep.schemas.password import PasswordGenerateRequest, PasswordGenerateResponse
from seedprep.schemas.mnemonic import (
    MnemonicClassifyRequest,
    MnemonicClassifyResponse,
    MnemonicGenerateRequest,
    MnemonicGenerateResponse,
)

__all__ = [
    "MnemonicSecretRequest",
    "PasswordSecretRequest",
    "PreparedSecretResponse",
    "RawSecretRequest",
    "SecretRequest",
    "VerifyRequest",
    "VerifyResponse",
    "PasswordGenerateRequest", "PasswordGenerateResponse",
    "MnemonicClassifyRequest", "MnemonicClassifyResponse",
    "MnemonicGenerateRequest", "MnemonicGenerateResponse",
]
