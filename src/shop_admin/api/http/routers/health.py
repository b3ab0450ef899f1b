"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.shop_admin.api.http.app_data import ApplicationDependencies
from src.shop_admin.runtime.context import get_config

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe; does not check dependencies."""
    return {"status": "healthy", "service": "shop-admin"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    database_ok = app_deps.database_service.health_check()
    body = {
        "status": "ready" if database_ok else "unavailable",
        "environment": get_config().app.environment,
        "checks": {"database": database_ok},
    }
    if not database_ok:
        return JSONResponse(status_code=503, content=body)
    return body
