"""API routers for cxplan."""

from cxplan.api.routers import health, metrics, planned_production

__all__ = [
    "health",
    "metrics",
    "planned_production",
]
