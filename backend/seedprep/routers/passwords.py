"""
Password generation endpoint
"""

from fastapi import APIRouter, HTTPException, status

from seedprep.errors import EmptyDictionary, NoCharacterClassSelected
from seedprep.schemas.password import PasswordGenerateRequest, PasswordGenerateResponse
from seedprep.services.password_generator import generate_password
from seedprep.services.telemetry import increment_counter

router = APIRouter()


@router.post("/passwords/generate", response_model=PasswordGenerateResponse)
async def generate(options: PasswordGenerateRequest):
    try:
        password = generate_password(options)
    except NoCharacterClassSelected as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )
    except EmptyDictionary:
        increment_counter("password_generation_failures_total")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Word dictionary unavailable",
        )

    increment_counter("password_generated_total")
    return PasswordGenerateResponse(
        password=password,
        length=len(password),
        memorable=options.is_memorable_password,
    )
