"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from stockroom.api.http.app_data import ApplicationDependencies
from stockroom.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is serving requests."""
    return {"status": "healthy", "service": get_config().app.name}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    db_healthy = app_deps.database_service.health_check()

    body = {
        "status": "ready" if db_healthy else "not_ready",
        "checks": {"database": "healthy" if db_healthy else "unhealthy"},
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=body)
    return body
