"""
Mnemonic schemas
"""

from typing import Optional

from pydantic import BaseModel, Field

from seedprep.security_limits import MAX_REQUEST_TEXT_CHARS
from seedprep.services.mnemonics import MnemonicSize


class MnemonicClassifyRequest(BaseModel):
    phrase: str = Field(..., max_length=MAX_REQUEST_TEXT_CHARS)


class MnemonicClassifyResponse(BaseModel):
    word_count: int
    size: Optional[MnemonicSize] = None    # None: unsupported word count
    checksum_valid: bool


class MnemonicGenerateRequest(BaseModel):
    size: MnemonicSize = MnemonicSize.TWELVE_WORDS
    language: Optional[str] = Field(default=None, max_length=32)


class MnemonicGenerateResponse(BaseModel):
    mnemonic: str
    size: MnemonicSize
