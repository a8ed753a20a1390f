"""Tests for health checks and the metrics endpoint."""

from __future__ import annotations

from fastapi.testclient import TestClient

from cxplan.api.app import create_app
from cxplan.config import Settings
from cxplan.observability.metrics import NoOpMetric, get_metrics
from cxplan.services.lookup import InMemoryPlannedProductionLookup
from tests.conftest import VALID_BPNL, VALID_MATERIAL


class TestHealth:
    """Liveness and readiness checks."""

    def test_live(self, store: InMemoryPlannedProductionLookup) -> None:
        client = TestClient(create_app(Settings(env="test"), lookup=store))

        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_ready(self, store: InMemoryPlannedProductionLookup) -> None:
        client = TestClient(create_app(Settings(env="test"), lookup=store))

        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"][0]["type"] == "InMemoryPlannedProductionLookup"
        assert body["components"][0]["entries"] == 1

    def test_not_ready_without_gateway(self, store: InMemoryPlannedProductionLookup) -> None:
        app = create_app(Settings(env="test"), lookup=store)
        app.state.gateway = None
        client = TestClient(app)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestMetricsEndpoint:
    """Prometheus exposition."""

    def test_outcomes_exposed(self, store: InMemoryPlannedProductionLookup) -> None:
        client = TestClient(create_app(Settings(env="test", enable_metrics=True), lookup=store))
        client.get(
            f"/planned-production/request/{VALID_MATERIAL}/json",
            headers={"edc-bpn": VALID_BPNL},
        )

        response = client.get("/metrics")

        assert response.status_code == 200
        assert "cxplan_planned_production_responses_total" in response.text
        assert 'reason="UnsupportedRepresentation"' in response.text
        assert 'path="/planned-production/request/{material}/{representation}"' in response.text

    def test_disabled(self, store: InMemoryPlannedProductionLookup) -> None:
        client = TestClient(create_app(Settings(env="test", enable_metrics=False), lookup=store))

        assert client.get("/metrics").status_code == 404

    def test_disabled_gateway_does_not_count(
        self, store: InMemoryPlannedProductionLookup
    ) -> None:
        app = create_app(Settings(env="test", enable_metrics=False), lookup=store)
        client = TestClient(app)
        before = _global_not_implemented_count()

        response = client.get(
            f"/planned-production/request/{VALID_MATERIAL}/json",
            headers={"edc-bpn": VALID_BPNL},
        )

        assert response.status_code == 501
        assert isinstance(app.state.gateway.metrics.planned_production_responses_total, NoOpMetric)
        assert _global_not_implemented_count() == before


def _global_not_implemented_count() -> float:
    registry = get_metrics()._registry
    if registry is None:
        return 0.0
    value = registry.get_sample_value(
        "cxplan_planned_production_responses_total", {"response_class": "NotImplemented"}
    )
    return value or 0.0
