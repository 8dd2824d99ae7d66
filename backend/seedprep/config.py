"""
Configuration loaded from environment variables
Optional overrides come from a .env file next to the project
"""

from functools import lru_cache
from pathlib import Path

from mnemonic import Mnemonic
from pydantic_settings import BaseSettings, SettingsConfigDict

from seedprep.security_limits import (
    DEFAULT_FINGERPRINT_LENGTH,
    MAX_FINGERPRINT_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
)


# Find .env file - could be in current dir, parent (project root), or set via env
def _find_env_file() -> str:
    """Find .env file in current or parent directory"""
    # Check current directory first
    if Path(".env").exists():
        return ".env"
    # Check project root (when running from backend/)
    parent_env = Path(__file__).parent.parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    model_config = SettingsConfigDict(
        env_file=_find_env_file(),
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    BACKEND_HOST: str = "127.0.0.1"
    BACKEND_PORT: int = 18420
    ALLOWED_ORIGIN: str = "http://localhost:5173"   # CORS origin of the local UI client
    LOG_LEVEL: str = "INFO"

    # Payloads
    FINGERPRINT_LENGTH: int = DEFAULT_FINGERPRINT_LENGTH

    # Generators
    MNEMONIC_LANGUAGE: str = "english"
    MEMORABLE_WORDLIST_PATH: str = ""   # empty: BIP39 list of MNEMONIC_LANGUAGE
    DEFAULT_PASSWORD_LENGTH: int = 16


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings before the service starts."""
    errors = []

    if not 1 <= active_settings.FINGERPRINT_LENGTH <= MAX_FINGERPRINT_LENGTH:
        errors.append(f"FINGERPRINT_LENGTH must be between 1 and {MAX_FINGERPRINT_LENGTH}")

    if active_settings.MNEMONIC_LANGUAGE not in Mnemonic.list_languages():
        allowed = ", ".join(sorted(Mnemonic.list_languages()))
        errors.append(f"MNEMONIC_LANGUAGE must be one of: {allowed}")

    wordlist_path = active_settings.MEMORABLE_WORDLIST_PATH
    if wordlist_path and not Path(wordlist_path).is_file():
        errors.append("MEMORABLE_WORDLIST_PATH must point to an existing file")

    if not MIN_PASSWORD_LENGTH <= active_settings.DEFAULT_PASSWORD_LENGTH <= MAX_PASSWORD_LENGTH:
        errors.append(
            f"DEFAULT_PASSWORD_LENGTH must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH}"
        )

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ValueError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()
