"""
Word dictionaries for memorable passwords and mnemonics
Defaults to the official BIP39 wordlists shipped with the mnemonic package
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence, Tuple

from mnemonic import Mnemonic

from seedprep.config import Settings, settings
from seedprep.errors import EmptyDictionary
from seedprep.logging_config import log_dictionary_unavailable


@lru_cache(maxsize=None)
def bip39_wordlist(language: str = "english") -> Tuple[str, ...]:
    """BIP39 wordlist for a language (2048 words)"""
    if language not in Mnemonic.list_languages():
        log_dictionary_unavailable(f"bip39:{language}")
        raise EmptyDictionary(f"BIP39 wordlist '{language}'")
    return tuple(Mnemonic(language).wordlist)


def load_wordlist_file(path: str) -> Tuple[str, ...]:
    """Load a dictionary with one word per line, blank lines ignored"""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError:
        log_dictionary_unavailable(path)
        raise EmptyDictionary(f"Word dictionary {path}")

    words = tuple(line.strip() for line in content.splitlines() if line.strip())
    if not words:
        log_dictionary_unavailable(path)
        raise EmptyDictionary(f"Word dictionary {path}")
    return words


def memorable_words(active_settings: Optional[Settings] = None) -> Sequence[str]:
    """Dictionary used for memorable passwords"""
    active_settings = active_settings or settings
    if active_settings.MEMORABLE_WORDLIST_PATH:
        return load_wordlist_file(active_settings.MEMORABLE_WORDLIST_PATH)
    return bip39_wordlist(active_settings.MNEMONIC_LANGUAGE)
