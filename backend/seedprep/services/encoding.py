"""
Payload encoding
Each content field becomes (1-byte length, content bytes), in a fixed order per
secret type. Optional fields are omitted entirely when absent, so the receiving
side relies on field order and remaining length rather than presence flags.
"""

from typing import Dict, List, Optional, Tuple

from seedprep.errors import FieldTooLarge, MalformedPayload
from seedprep.logging_config import log_field_too_large
from seedprep.payloads import PAYLOAD_CLASSES, Payload
from seedprep.secret_types import SecretType
from seedprep.security_limits import MAX_FIELD_BYTES

# (attribute, is_text) in wire order.
FIELD_LAYOUTS: Dict[SecretType, Tuple[Tuple[str, bool], ...]] = {
    SecretType.MASTERSEED: (("masterseed", False),),
    SecretType.ELECTRUM_MNEMONIC: (("mnemonic", True), ("passphrase", True)),
    SecretType.BIP39_MNEMONIC: (("mnemonic", True), ("passphrase", True)),
    SecretType.PUBKEY: (("pubkey", False),),
    SecretType.SECRET_2FA: (("secret", False),),
    SecretType.PASSWORD: (("password", True), ("login", True), ("url", True)),
    SecretType.DEFAULT_TYPE: (("data", False),),
}

TYPE_NAMES: Dict[SecretType, str] = {
    SecretType.MASTERSEED: "Masterseed",
    SecretType.ELECTRUM_MNEMONIC: "Electrum seed",
    SecretType.BIP39_MNEMONIC: "Bip39 seed",
    SecretType.PUBKEY: "Pubkey",
    SecretType.SECRET_2FA: "2FA secret",
    SecretType.PASSWORD: "Password",
    SecretType.DEFAULT_TYPE: "Secret",
}


def _layout_for(payload: Payload) -> Tuple[Tuple[str, bool], ...]:
    try:
        return FIELD_LAYOUTS[payload.secret_type]
    except (AttributeError, KeyError):
        raise TypeError(f"Unsupported payload: {type(payload).__name__}")


def content_fields(payload: Payload) -> List[Tuple[str, Optional[bytes]]]:
    """Return (field name, raw bytes or None) pairs in wire order"""
    fields = []
    for name, is_text in _layout_for(payload):
        value = getattr(payload, name)
        if value is not None and is_text:
            value = value.encode("utf-8")
        fields.append((name, value))
    return fields


def encode(payload: Payload) -> bytes:
    """
    Encode a payload into its canonical TLV byte sequence.

    Raises:
      FieldTooLarge if any field exceeds MAX_FIELD_BYTES. Nothing is
      encoded in that case.
    """
    fields = content_fields(payload)

    for name, value in fields:
        if value is not None and len(value) > MAX_FIELD_BYTES:
            log_field_too_large(type_name(payload), name, len(value))
            raise FieldTooLarge(name, len(value), MAX_FIELD_BYTES)

    encoded = bytearray()
    for _, value in fields:
        if value is None:
            continue
        encoded.append(len(value))
        encoded.extend(value)
    return bytes(encoded)


def display_string(payload: Payload) -> str:
    """Human-oriented rendering: hex for raw bytes, the phrase for text secrets"""
    name, is_text = _layout_for(payload)[0]
    value = getattr(payload, name)
    if is_text:
        return value
    return value.hex()


def type_name(payload: Payload) -> str:
    try:
        return TYPE_NAMES[payload.secret_type]
    except (AttributeError, KeyError):
        raise TypeError(f"Unsupported payload: {type(payload).__name__}")


def split_fields(data: bytes) -> List[bytes]:
    """Split a TLV byte sequence into its field contents"""
    fields = []
    offset = 0
    while offset < len(data):
        size = data[offset]
        offset += 1
        end = offset + size
        if end > len(data):
            raise MalformedPayload(
                f"Field at offset {offset - 1} declares {size} bytes, "
                f"only {len(data) - offset} remain"
            )
        fields.append(bytes(data[offset:end]))
        offset = end
    return fields


def decode(secret_type: SecretType, data: bytes, label: str = "") -> Payload:
    """
    Rebuild a payload from encoded bytes.

    Optional fields are assigned in wire order, so a password carrying a
    single optional field is read back with that field as its login.
    """
    secret_type = SecretType(secret_type)
    layout = FIELD_LAYOUTS[secret_type]
    payload_cls = PAYLOAD_CLASSES[secret_type]
    fields = split_fields(data)

    required = sum(
        1 for name, _ in layout if payload_cls.model_fields[name].is_required()
    )
    if not required <= len(fields) <= len(layout):
        raise MalformedPayload(
            f"{TYPE_NAMES[secret_type]} expects {required} to {len(layout)} fields, "
            f"got {len(fields)}"
        )

    values = {}
    for (name, is_text), raw in zip(layout, fields):
        if is_text:
            try:
                values[name] = raw.decode("utf-8")
            except UnicodeDecodeError:
                raise MalformedPayload(f"{name} is not valid UTF-8")
        else:
            values[name] = raw

    return payload_cls(label=label, **values)
