import pytest
from mnemonic import Mnemonic

from seedprep.errors import EmptyDictionary
from seedprep.payloads import MasterseedPayload
from seedprep.services.mnemonics import (
    MnemonicSize,
    classify_mnemonic_size,
    generate_mnemonic,
    is_valid_mnemonic,
    mnemonic_to_masterseed,
    word_count,
)


def _phrase(count: int) -> str:
    return " ".join(f"word{i}" for i in range(1, count + 1))


@pytest.mark.parametrize(
    "count, expected",
    [
        (12, MnemonicSize.TWELVE_WORDS),
        (18, MnemonicSize.EIGHTEEN_WORDS),
        (24, MnemonicSize.TWENTY_FOUR_WORDS),
    ],
)
def test_supported_sizes_are_classified(count: int, expected: MnemonicSize):
    assert classify_mnemonic_size(_phrase(count)) is expected


@pytest.mark.parametrize("count", [0, 1, 11, 13, 17, 25])
def test_other_sizes_are_unclassified(count: int):
    assert classify_mnemonic_size(_phrase(count)) is None


def test_repeated_spaces_do_not_count_as_words():
    phrase = "  ".join(f"word{i}" for i in range(12))
    assert word_count(phrase) == 12
    assert classify_mnemonic_size(phrase) is MnemonicSize.TWELVE_WORDS


def test_classification_splits_on_spaces_only():
    # Newlines are not word separators
    phrase = "\n".join(f"word{i}" for i in range(12))
    assert classify_mnemonic_size(phrase) is None


def test_classification_does_not_check_wordlist():
    assert classify_mnemonic_size(_phrase(12)) is MnemonicSize.TWELVE_WORDS
    assert not is_valid_mnemonic(_phrase(12))


def test_mnemonic_size_strength():
    assert MnemonicSize.TWELVE_WORDS.strength == 128
    assert MnemonicSize.EIGHTEEN_WORDS.strength == 192
    assert MnemonicSize.TWENTY_FOUR_WORDS.strength == 256


@pytest.mark.parametrize("size", list(MnemonicSize))
def test_generate_mnemonic(size: MnemonicSize):
    phrase = generate_mnemonic(size)

    assert classify_mnemonic_size(phrase) is size
    assert is_valid_mnemonic(phrase)


def test_generate_mnemonic_rejects_unknown_language():
    with pytest.raises(EmptyDictionary):
        generate_mnemonic(MnemonicSize.TWELVE_WORDS, language="klingon")


def test_is_valid_mnemonic(valid_mnemonic):
    assert is_valid_mnemonic(valid_mnemonic)
    assert is_valid_mnemonic("  " + valid_mnemonic.upper() + " ")
    assert not is_valid_mnemonic(" ".join(["abandon"] * 12))


def test_mnemonic_to_masterseed(valid_mnemonic):
    payload = mnemonic_to_masterseed(valid_mnemonic, passphrase="TREZOR", label="wallet")

    assert isinstance(payload, MasterseedPayload)
    assert payload.label == "wallet"
    assert len(payload.masterseed) == 64
    assert payload.masterseed == Mnemonic.to_seed(valid_mnemonic, passphrase="TREZOR")
