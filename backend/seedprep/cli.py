"""
Command-line front-end
Generates passwords and mnemonics and prints encoded payloads.
Secrets are printed once and never written to disk.
"""

import argparse
import sys

from seedprep.config import settings
from seedprep.payloads import PasswordPayload
from seedprep.secret_types import SecretCreationMode
from seedprep.services.encoding import type_name
from seedprep.services.mnemonics import (
    MnemonicSize,
    classify_mnemonic_size,
    generate_mnemonic,
    word_count,
)
from seedprep.services.password_generator import PasswordOptions, generate_password
from seedprep.services.preparation import prepare_secret


def build_parser():
    parser = argparse.ArgumentParser(
        prog="seedprep",
        description="Prepare secrets for a SeedKeeper card",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    password = commands.add_parser("password", help="Generate a password")
    password.add_argument("--length", type=int, default=settings.DEFAULT_PASSWORD_LENGTH,
                          help="Characters, or words with --memorable")
    password.add_argument("--no-lowercase", action="store_true")
    password.add_argument("--no-uppercase", action="store_true")
    password.add_argument("--no-numbers", action="store_true")
    password.add_argument("--symbols", action="store_true")
    password.add_argument("--memorable", action="store_true", help="Use dictionary words")

    mnemonic = commands.add_parser("mnemonic", help="Generate a BIP39 mnemonic")
    mnemonic.add_argument("--words", type=int, default=12,
                          choices=[size.value for size in MnemonicSize])
    mnemonic.add_argument("--language", default=None)

    classify = commands.add_parser("classify", help="Classify a mnemonic by word count")
    classify.add_argument("phrase")

    encode_password = commands.add_parser("encode-password", help="Encode a password payload")
    encode_password.add_argument("--label", required=True)
    encode_password.add_argument("--password", required=True)
    encode_password.add_argument("--login")
    encode_password.add_argument("--url")

    commands.add_parser("serve", help="Run the local HTTP service")

    return parser


def _password(args) -> int:
    options = PasswordOptions(
        password_length=args.length,
        include_lowercase=not args.no_lowercase,
        include_uppercase=not args.no_uppercase,
        include_numbers=not args.no_numbers,
        include_symbols=args.symbols,
        is_memorable_password=args.memorable,
    )
    print(generate_password(options))
    return 0


def _mnemonic(args) -> int:
    print(generate_mnemonic(MnemonicSize(args.words), args.language))
    return 0


def _classify(args) -> int:
    size = classify_mnemonic_size(args.phrase)
    if size is None:
        print(f"[SEEDPREP] Unsupported mnemonic size: {word_count(args.phrase)} words")
        return 1
    print(f"[SEEDPREP] {size.value} words")
    return 0


def _serve(args) -> int:
    import uvicorn

    uvicorn.run("seedprep.main:app", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
    return 0


def _encode_password(args) -> int:
    payload = PasswordPayload(
        label=args.label,
        password=args.password,
        login=args.login,
        url=args.url,
    )
    prepared = prepare_secret(payload, SecretCreationMode.MANUAL_IMPORT)
    print(f"[SEEDPREP] Type:        {type_name(payload)} (0x{prepared.secret_type:02x})")
    print(f"[SEEDPREP] Payload:     {prepared.payload.hex()}")
    print(f"[SEEDPREP] Fingerprint: {prepared.fingerprint.hex()}")
    return 0


COMMANDS = {
    "password": _password,
    "mnemonic": _mnemonic,
    "classify": _classify,
    "encode-password": _encode_password,
    "serve": _serve,
}


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    try:
        return COMMANDS[args.command](args)
    except ValueError as exc:
        # SeedprepError and invalid option values
        print(f"[SEEDPREP] ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
