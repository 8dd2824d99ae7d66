"""
Pytest fixtures for Seedprep backend tests
"""

import os
import random
import pytest
from typing import AsyncGenerator

# Pin generator settings before imports so a developer .env cannot leak in
os.environ["FINGERPRINT_LENGTH"] = "4"
os.environ["MNEMONIC_LANGUAGE"] = "english"
os.environ["MEMORABLE_WORDLIST_PATH"] = ""

from httpx import AsyncClient, ASGITransport
from seedprep.main import app
from seedprep.services.telemetry import reset_counters


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture(autouse=True)
def clean_counters():
    """Telemetry counters start empty for every test."""
    reset_counters()
    yield
    reset_counters()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source (tests only - production uses SystemRandom)."""
    return random.Random(1234)


@pytest.fixture
def memorable_words() -> list:
    """Small fixed dictionary without symbols or digits."""
    return ["alpha", "bravo", "charlie", "delta"]


@pytest.fixture
def valid_mnemonic() -> str:
    """BIP39 test vector mnemonic (all-zero entropy)."""
    return " ".join(["abandon"] * 11 + ["about"])


@pytest.fixture
def password_payload():
    from seedprep.payloads import PasswordPayload

    return PasswordPayload(label="site", password="Ab1!", login="user", url=None)
