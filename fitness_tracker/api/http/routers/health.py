"""Health check endpoints for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from fitness_tracker.api.http.deps import get_db_service
from fitness_tracker.core.services import DbSessionService
from fitness_tracker.runtime.context import get_config

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is serving requests."""
    return {"status": "healthy", "service": "fitness-tracker"}


@router.get("/ready", response_model=None)
async def readiness(
    db_service: DbSessionService = Depends(get_db_service),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 503 when the database cannot be reached."""
    config = get_config()
    db_healthy = db_service.health_check()
    checks = {
        "database": {
            "status": "healthy" if db_healthy else "unhealthy",
            "type": "sqlite" if config.database.is_sqlite else "sql",
        }
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content={"status": "not_ready", "checks": checks})
    return {"status": "ready", "checks": checks}
