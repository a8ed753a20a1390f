"""Prometheus metrics for cxplan.

Provides metrics collection and exposure:
- HTTP request metrics (latency, count)
- PlannedProduction outcomes by response class
- Rejections by reason code

Usage:
    from cxplan.observability.metrics import get_metrics

    metrics = get_metrics()
    metrics.planned_production_responses_total.labels(response_class="Ok").inc()
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from cxplan.config import settings

if TYPE_CHECKING:
    from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class NoOpMetric:
    """No-op metric for when metrics are disabled."""

    def labels(self, **kwargs: Any) -> "NoOpMetric":
        """Return self for chaining."""
        return self

    def inc(self, amount: float = 1) -> None:
        pass

    def observe(self, value: float) -> None:
        pass


@dataclass
class MetricsRegistry:
    """Registry for Prometheus metrics."""

    enabled: bool = True

    # HTTP metrics
    http_requests_total: Any = field(default_factory=NoOpMetric)
    http_request_duration_seconds: Any = field(default_factory=NoOpMetric)

    # Business metrics
    planned_production_responses_total: Any = field(default_factory=NoOpMetric)
    planned_production_rejections_total: Any = field(default_factory=NoOpMetric)

    # Internal state
    _initialized: bool = field(default=False, repr=False)
    _registry: CollectorRegistry | None = field(default=None, repr=False)

    def initialize(self) -> None:
        """Initialize Prometheus metrics."""
        if self._initialized:
            return

        self._initialized = True
        if not self.enabled:
            logger.info("Metrics are disabled")
            return

        self._registry = CollectorRegistry()

        self.http_requests_total = Counter(
            "cxplan_http_requests_total",
            "Total HTTP requests",
            ["method", "path", "status"],
            registry=self._registry,
        )

        self.http_request_duration_seconds = Histogram(
            "cxplan_http_request_duration_seconds",
            "HTTP request latency in seconds",
            ["method", "path"],
            buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
            registry=self._registry,
        )

        self.planned_production_responses_total = Counter(
            "cxplan_planned_production_responses_total",
            "PlannedProduction requests by response class",
            ["response_class"],
            registry=self._registry,
        )

        self.planned_production_rejections_total = Counter(
            "cxplan_planned_production_rejections_total",
            "Rejected PlannedProduction requests by reason",
            ["reason"],
            registry=self._registry,
        )

        logger.info("Prometheus metrics initialized")

    def generate_latest(self) -> bytes:
        """Generate Prometheus metrics in exposition format."""
        if self._registry is None:
            return b"# Metrics disabled\n"
        return generate_latest(self._registry)


# Global metrics registry
metrics_registry = MetricsRegistry(enabled=settings.enable_metrics)


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry.

    Initializes metrics on first access.
    """
    if not metrics_registry._initialized:
        metrics_registry.initialize()
    return metrics_registry


def disabled_metrics() -> MetricsRegistry:
    """Return a registry whose metrics are all no-ops."""
    registry = MetricsRegistry(enabled=False)
    registry.initialize()
    return registry


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware for HTTP request metrics.

    Records:
    - Request count by method, path, status
    - Request duration histogram
    """

    def __init__(self, app: "ASGIApp") -> None:
        super().__init__(app)
        self.metrics = get_metrics()

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        """Record metrics for HTTP requests."""
        if request.url.path in ("/health/live", "/health/ready", "/metrics"):
            return await call_next(request)

        method = request.method
        path = normalize_path(request.url.path)

        start_time = time.perf_counter()
        status_code = 500  # Default in case of exception

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            duration = time.perf_counter() - start_time
            self.metrics.http_requests_total.labels(
                method=method,
                path=path,
                status=status_code,
            ).inc()
            self.metrics.http_request_duration_seconds.labels(
                method=method,
                path=path,
            ).observe(duration)


def normalize_path(path: str) -> str:
    """Normalize path by replacing identifiers with placeholders.

    This prevents high cardinality in metrics.

    Examples:
        /planned-production/request/urn:uuid:.../$value
            -> /planned-production/request/{material}/{representation}
    """
    parts = path.strip("/").split("/")
    if len(parts) >= 2 and parts[0] == "planned-production" and parts[1] == "request":
        normalized = ["planned-production", "request"]
        if len(parts) > 2:
            normalized.append("{material}")
        if len(parts) > 3:
            normalized.append("{representation}")
        return "/" + "/".join(normalized)
    return path

