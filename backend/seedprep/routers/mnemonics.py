"""
Mnemonic endpoints
"""

from fastapi import APIRouter, HTTPException, status

from seedprep.errors import EmptyDictionary
from seedprep.schemas.mnemonic import (
    MnemonicClassifyRequest,
    MnemonicClassifyResponse,
    MnemonicGenerateRequest,
    MnemonicGenerateResponse,
)
from seedprep.services.mnemonics import (
    classify_mnemonic_size,
    generate_mnemonic,
    is_valid_mnemonic,
    word_count,
)
from seedprep.services.telemetry import increment_counter

router = APIRouter()


@router.post("/mnemonics/classify", response_model=MnemonicClassifyResponse)
async def classify(request: MnemonicClassifyRequest):
    size = classify_mnemonic_size(request.phrase)
    return MnemonicClassifyResponse(
        word_count=word_count(request.phrase),
        size=size,
        checksum_valid=size is not None and is_valid_mnemonic(request.phrase),
    )


@router.post("/mnemonics/generate", response_model=MnemonicGenerateResponse)
async def generate(request: MnemonicGenerateRequest):
    try:
        mnemonic = generate_mnemonic(request.size, request.language)
    except EmptyDictionary:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Unsupported mnemonic language",
        )

    increment_counter("mnemonic_generated_total")
    return MnemonicGenerateResponse(mnemonic=mnemonic, size=request.size)
