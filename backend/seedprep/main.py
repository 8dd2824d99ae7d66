"""
Seedprep Backend - local companion service for SeedKeeper secret preparation
Nothing is stored: secrets are encoded and handed back to the caller.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from seedprep.config import settings, validate_settings
from seedprep.routers import health, secrets, passwords, mnemonics
from seedprep.middleware.security import SecurityMiddleware
from seedprep.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    # Setup logging
    setup_logging(settings.LOG_LEVEL)

    # Validate settings before serving requests.
    validate_settings(settings)

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="Seedprep",
        description="Secret payload encoding and generation for SeedKeeper cards",
        version="1.0.0",
        docs_url=None,      # Disable Swagger in production
        redoc_url=None,     # Disable ReDoc in production
        openapi_url=None,   # Disable OpenAPI schema
        lifespan=lifespan
    )

    # Security headers
    app.add_middleware(SecurityMiddleware)

    # CORS - restrictive
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.ALLOWED_ORIGIN],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # Register routers
    app.include_router(health.router, tags=["health"])
    app.include_router(secrets.router, prefix="/api", tags=["secrets"])
    app.include_router(passwords.router, prefix="/api", tags=["passwords"])
    app.include_router(mnemonics.router, prefix="/api", tags=["mnemonics"])

    return app


app = create_app()
