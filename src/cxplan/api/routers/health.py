"""Health check endpoints for cxplan.

Provides Kubernetes-compatible liveness and readiness checks:
- /health/live  - Liveness check (always returns OK if process is running)
- /health/ready - Readiness check (checks that a lookup collaborator is wired)
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health/live")
async def live() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}


@router.get("/health/ready")
async def ready(request: Request) -> JSONResponse:
    """Readiness check.

    Returns 200 once the gateway and its lookup collaborator are in place,
    503 otherwise.
    """
    gateway = getattr(request.app.state, "gateway", None)
    lookup = getattr(gateway, "lookup", None)

    component: dict[str, Any] = {
        "name": "lookup",
        "status": "healthy" if lookup is not None else "unhealthy",
    }
    if lookup is not None:
        component["type"] = type(lookup).__name__
        if hasattr(lookup, "__len__"):
            component["entries"] = len(lookup)

    healthy = lookup is not None
    return JSONResponse(
        content={
            "status": "healthy" if healthy else "unhealthy",
            "components": [component],
        },
        status_code=200 if healthy else 503,
    )
