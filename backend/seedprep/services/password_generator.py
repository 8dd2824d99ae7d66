"""
Cryptographically secure password generation
Uses the system CSPRNG unless a random source is injected (tests only)
"""

import random
import secrets
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from seedprep.config import settings
from seedprep.errors import EmptyDictionary, NoCharacterClassSelected
from seedprep.logging_config import log_dictionary_unavailable, log_password_generated
from seedprep.security_limits import MAX_PASSWORD_LENGTH, MIN_PASSWORD_LENGTH
from seedprep.services.wordlist import memorable_words

LOWERCASE_SET = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE_SET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
NUMBER_SET = "0123456789"
SYMBOL_SET = "!@#$%^&*()-_=+{}[]|;:'\",.<>?/`~"
DEFAULT_SEPARATOR = "-"

_system_random = secrets.SystemRandom()


class PasswordOptions(BaseModel):
    """Password generator configuration"""
    password_length: int = Field(
        default_factory=lambda: settings.DEFAULT_PASSWORD_LENGTH,
        ge=MIN_PASSWORD_LENGTH,
        le=MAX_PASSWORD_LENGTH,
    )
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = False
    is_memorable_password: bool = False

    def has_character_class(self) -> bool:
        return (
            self.include_lowercase
            or self.include_uppercase
            or self.include_numbers
            or self.include_symbols
        )


def character_set(options: PasswordOptions) -> str:
    """Alphabet for character mode, classes in fixed order"""
    alphabet = ""
    if options.include_lowercase:
        alphabet += LOWERCASE_SET
    if options.include_uppercase:
        alphabet += UPPERCASE_SET
    if options.include_numbers:
        alphabet += NUMBER_SET
    if options.include_symbols:
        alphabet += SYMBOL_SET
    return alphabet


def _format_word(word: str, uppercase: bool, with_number: bool, rng: random.Random) -> str:
    if uppercase:
        word = word[:1].upper() + word[1:]
    if with_number:
        word += str(rng.randrange(10))
    return word


def _memorable_password(options: PasswordOptions, words: Sequence[str], rng: random.Random) -> str:
    password = ""
    for _ in range(options.password_length):
        word = rng.choice(words)
        separator = rng.choice(SYMBOL_SET) if options.include_symbols else DEFAULT_SEPARATOR
        password += _format_word(word, options.include_uppercase, options.include_numbers, rng)
        password += separator
    # Drop the separator after the last word
    return password[:-1]


def generate_password(
    options: PasswordOptions,
    words: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a password from options.

    Character mode draws password_length characters with replacement from the
    selected classes; a class being selected does not guarantee it appears.
    Memorable mode draws password_length words from the dictionary.

    Raises:
      NoCharacterClassSelected if no class is selected in character mode.
      EmptyDictionary if memorable mode has no words to draw from.
    """
    rng = rng or _system_random

    if options.is_memorable_password:
        if words is None:
            words = memorable_words()
        if not words:
            log_dictionary_unavailable("memorable word dictionary")
            raise EmptyDictionary()
        password = _memorable_password(options, words, rng)
        log_password_generated("memorable", options.password_length)
        return password

    alphabet = character_set(options)
    if not alphabet:
        raise NoCharacterClassSelected()

    password = "".join(rng.choice(alphabet) for _ in range(options.password_length))
    log_password_generated("character", options.password_length)
    return password


def can_generate_password(label: Optional[str], options: PasswordOptions) -> bool:
    """Whether generation may start: a label and at least one character class"""
    return bool(label) and options.has_character_class()


def can_import_password(label: Optional[str], password: str) -> bool:
    """Whether a manually entered password may be imported"""
    return bool(label) and len(password) >= 1
