# Seedprep Business Logic Services
from seedprep.services.encoding import decode, display_string, encode, split_fields, type_name
from seedprep.services.fingerprint import fingerprint, fingerprint_hex, verify_fingerprint
from seedprep.services.mnemonics import MnemonicSize, classify_mnemonic_size
from seedprep.services.password_generator import PasswordOptions, generate_password
from seedprep.services.preparation import PreparedSecret, prepare_secret

__all__ = [
    "decode", "display_string", "encode", "split_fields", "type_name",
    "fingerprint", "fingerprint_hex", "verify_fingerprint",
    "MnemonicSize", "classify_mnemonic_size",
    "PasswordOptions", "generate_password",
    "PreparedSecret", "prepare_secret",
]
