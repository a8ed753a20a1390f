"""FastAPI application factory for cxplan.

Creates the application with:
- The PlannedProduction Submodel 2.0.0 request endpoint
- Health checks and Prometheus metrics
- Correlation IDs and security headers
- IDTA-compliant handling of unexpected errors
- ORJSON for fast JSON serialization
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from starlette.types import ExceptionHandler

from cxplan import __version__
from cxplan.api.errors import generic_exception_handler
from cxplan.api.middleware import CorrelationMiddleware, SecurityHeadersMiddleware
from cxplan.api.routers import health, planned_production
from cxplan.api.routers import metrics as metrics_router
from cxplan.config import Settings
from cxplan.config import settings as default_settings
from cxplan.core.gateway import PlannedProductionGateway
from cxplan.observability import configure_logging
from cxplan.observability.metrics import MetricsMiddleware, disabled_metrics, get_metrics
from cxplan.services.lookup import InMemoryPlannedProductionLookup, PlannedProductionLookup

logger = logging.getLogger(__name__)


def build_lookup(settings: Settings) -> PlannedProductionLookup:
    """Create the default lookup collaborator from settings."""
    if settings.seed_file is not None:
        return InMemoryPlannedProductionLookup.from_file(settings.seed_file)
    logger.info("No seed file configured, starting with an empty PlannedProduction store")
    return InMemoryPlannedProductionLookup()


def create_app(
    settings: Settings | None = None,
    lookup: PlannedProductionLookup | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings (default: module-level settings)
        lookup: PlannedProduction collaborator (default: in-memory store,
            seeded from ``settings.seed_file`` when set)
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # JSON in production, console in dev
        configure_logging(
            json_format=settings.env != "dev",
            level=settings.log_level,
        )
        logger.info(f"Starting {settings.app_name} ({settings.env})")
        yield
        logger.info(f"{settings.app_name} shutdown complete")

    app = FastAPI(
        title="cxplan",
        description="PlannedProduction Submodel 2.0.0 exchange endpoint",
        version=__version__,
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
    )

    metrics = get_metrics() if settings.enable_metrics else disabled_metrics()
    app.state.gateway = PlannedProductionGateway(
        lookup if lookup is not None else build_lookup(settings),
        metrics=metrics,
    )
    app.state.partner_header = settings.partner_header

    # Order matters: CorrelationMiddleware is innermost so log records
    # emitted by handlers carry the request id
    app.add_middleware(CorrelationMiddleware)
    if settings.enable_metrics:
        app.add_middleware(MetricsMiddleware)

    # Security headers middleware (outermost for response headers)
    if settings.enable_security_headers:
        app.add_middleware(
            SecurityHeadersMiddleware,
            enable_hsts=settings.enable_hsts,
            hsts_max_age=settings.hsts_max_age,
            hsts_include_subdomains=settings.hsts_include_subdomains,
            hsts_preload=settings.hsts_preload,
            csp_policy=settings.csp_policy,
        )

    app.add_exception_handler(Exception, cast(ExceptionHandler, generic_exception_handler))

    app.include_router(health.router)
    if settings.enable_metrics:
        app.include_router(metrics_router.router)
    app.include_router(planned_production.router)

    return app
