"""
Health check endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from seedprep.services.telemetry import get_counters_snapshot

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}


@router.get("/health/stats")
async def stats():
    """Counters of prepared secrets and generated passwords (no content)"""
    return {
        "status": "healthy",
        "counters": get_counters_snapshot(),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
