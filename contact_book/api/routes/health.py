"""Health Probes — liveness and database readiness for the Contact Book API.

Invariants:
    - GET /api/v1/health/ returns 200 while the process is up
    - GET /api/v1/health/ready returns 503 until the session manager is initialised
      and the database answers SELECT 1
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from contact_book import __version__
from contact_book.infrastructure import database

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "contact-book-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
