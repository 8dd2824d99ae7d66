# Seedprep API Routers
from seedprep.routers import health, secrets, passwords, mnemonics

__all__ = ["health", "secrets", "passwords", "mnemonics"]
