"""
Mnemonic phrase helpers
Size classification is a pure word count. Wordlist and checksum validation,
generation and seed derivation are delegated to the mnemonic package.
"""

from enum import IntEnum
from typing import Optional

from mnemonic import Mnemonic

from seedprep.config import settings
from seedprep.payloads import MasterseedPayload
from seedprep.services.wordlist import bip39_wordlist
from seedprep.utils.crypto import normalize_words


class MnemonicSize(IntEnum):
    """Supported mnemonic lengths, valued by word count"""

    TWELVE_WORDS = 12
    EIGHTEEN_WORDS = 18
    TWENTY_FOUR_WORDS = 24

    @property
    def strength(self) -> int:
        """Entropy bits for a BIP39 mnemonic of this size"""
        return self.value * 32 // 3


def word_count(phrase: str) -> int:
    # Repeated spaces do not produce empty words
    return len([word for word in phrase.split(" ") if word])


def classify_mnemonic_size(phrase: str) -> Optional[MnemonicSize]:
    """Classify a phrase by its word count, None when unsupported"""
    count = word_count(phrase)
    if count in MnemonicSize._value2member_map_:
        return MnemonicSize(count)
    return None


def _mnemonic(language: Optional[str]) -> Mnemonic:
    language = language or settings.MNEMONIC_LANGUAGE
    # Raises EmptyDictionary for unknown languages
    bip39_wordlist(language)
    return Mnemonic(language)


def generate_mnemonic(size: MnemonicSize = MnemonicSize.TWELVE_WORDS, language: Optional[str] = None) -> str:
    """Generate a BIP39 mnemonic with the given number of words"""
    return _mnemonic(language).generate(strength=MnemonicSize(size).strength)


def is_valid_mnemonic(phrase: str, language: Optional[str] = None) -> bool:
    """Check wordlist membership and checksum"""
    normalized = normalize_words(phrase)
    if classify_mnemonic_size(normalized) is None:
        return False
    return _mnemonic(language).check(normalized)


def mnemonic_to_masterseed(phrase: str, passphrase: str = "", label: str = "") -> MasterseedPayload:
    """Derive the BIP39 seed of a mnemonic as a masterseed payload"""
    seed = Mnemonic.to_seed(phrase, passphrase=passphrase)
    return MasterseedPayload(label=label, masterseed=seed)
