"""
Secret preparation endpoints
Turns structured secrets into encoded payloads for the card transport.
"""

from typing import Annotated

from fastapi import APIRouter, Body, HTTPException, status

from seedprep.config import settings
from seedprep.errors import FieldTooLarge, MalformedPayload
from seedprep.payloads import (
    Bip39MnemonicPayload,
    DefaultPayload,
    ElectrumMnemonicPayload,
    MasterseedPayload,
    PasswordPayload,
    Payload,
    PubkeyPayload,
    Secret2FAPayload,
)
from seedprep.schemas.secret import (
    MnemonicSecretRequest,
    PreparedSecretResponse,
    RawSecretRequest,
    SecretRequest,
    VerifyRequest,
    VerifyResponse,
)
from seedprep.security_limits import MAX_FINGERPRINT_LENGTH, MAX_REQUEST_FIELD_BYTES
from seedprep.services.encoding import decode, type_name
from seedprep.services.fingerprint import verify_fingerprint
from seedprep.services.mnemonics import classify_mnemonic_size
from seedprep.services.preparation import prepare_secret
from seedprep.utils.payload_validation import decode_hex_field

router = APIRouter()

# kind -> (payload class, content attribute)
RAW_PAYLOADS = {
    "masterseed": (MasterseedPayload, "masterseed"),
    "pubkey": (PubkeyPayload, "pubkey"),
    "secret_2fa": (Secret2FAPayload, "secret"),
    "default": (DefaultPayload, "data"),
}


def build_payload(secret: SecretRequest) -> Payload:
    if isinstance(secret, RawSecretRequest):
        payload_cls, attribute = RAW_PAYLOADS[secret.kind]
        data = decode_hex_field(
            secret.data_hex,
            field_name="data_hex",
            max_bytes=MAX_REQUEST_FIELD_BYTES,
        )
        return payload_cls(label=secret.label, **{attribute: data})

    if isinstance(secret, MnemonicSecretRequest):
        if classify_mnemonic_size(secret.mnemonic) is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Unsupported mnemonic size",
            )
        if secret.kind == "electrum_mnemonic":
            payload_cls = ElectrumMnemonicPayload
        else:
            payload_cls = Bip39MnemonicPayload
        return payload_cls(
            label=secret.label,
            mnemonic=secret.mnemonic,
            passphrase=secret.passphrase,
        )

    return PasswordPayload(
        label=secret.label,
        password=secret.password,
        login=secret.login,
        url=secret.url,
    )


@router.post("/secrets/prepare", response_model=PreparedSecretResponse)
async def prepare(secret: Annotated[SecretRequest, Body(discriminator="kind")]):
    payload = build_payload(secret)

    try:
        prepared = prepare_secret(payload, secret.mode)
    except FieldTooLarge as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return PreparedSecretResponse(
        secret_type=int(prepared.secret_type),
        subtype=prepared.subtype,
        label=prepared.label,
        type_name=type_name(payload),
        payload_hex=prepared.payload.hex(),
        fingerprint=prepared.fingerprint.hex(),
    )


@router.post("/secrets/verify", response_model=VerifyResponse)
async def verify(request: VerifyRequest):
    data = decode_hex_field(
        request.payload_hex,
        field_name="payload_hex",
        max_bytes=MAX_REQUEST_FIELD_BYTES,
    )
    expected = decode_hex_field(
        request.fingerprint,
        field_name="fingerprint",
        max_bytes=MAX_FINGERPRINT_LENGTH,
        exact_bytes=settings.FINGERPRINT_LENGTH,
    )

    try:
        decode(request.secret_type, data)
    except MalformedPayload as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )

    return VerifyResponse(valid=verify_fingerprint(data, expected))
