"""Global pytest configuration and fixtures."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import pytest

from cxplan.core.gateway import RejectionReason
from cxplan.core.model import (
    AllocatedPlannedProductionOutput,
    OrderPositionReference,
    PlannedProductionOutput,
    Position,
    Quantity,
)
from cxplan.services.lookup import InMemoryPlannedProductionLookup

VALID_BPNL = "BPNL1234567890AB"
VALID_MATERIAL = "urn:uuid:123e4567-e89b-12d3-a456-426614174000"


class RecordingDiagnosticSink:
    """Diagnostic sink that keeps every emitted record."""

    def __init__(self) -> None:
        self.records: list[tuple[RejectionReason, dict[str, Any]]] = []

    def emit(self, reason: RejectionReason, **fields: Any) -> None:
        self.records.append((reason, fields))

    @property
    def reasons(self) -> list[RejectionReason]:
        return [reason for reason, _ in self.records]


@pytest.fixture
def diagnostics() -> RecordingDiagnosticSink:
    return RecordingDiagnosticSink()


@pytest.fixture
def planned_output() -> PlannedProductionOutput:
    """A populated PlannedProduction submodel."""
    return PlannedProductionOutput(
        material_global_asset_id="urn:uuid:0b1d9c4e-5d7f-4e0a-9f3b-7a6c2d1e8f90",
        positions=[
            Position(
                order_position_reference=OrderPositionReference(
                    supplier_order_id="SO-4711",
                    customer_order_id="CO-0815",
                    customer_order_position_id="10",
                ),
                allocated_planned_production_outputs=[
                    AllocatedPlannedProductionOutput(
                        planned_production_quantity=Quantity(value=100.0, unit="unit:piece"),
                        estimated_time_of_completion=datetime(
                            2026, 11, 2, 12, 0, tzinfo=timezone.utc
                        ),
                        last_updated_on_date_time=datetime(
                            2026, 10, 19, 8, 30, tzinfo=timezone.utc
                        ),
                    )
                ],
            )
        ],
    )


@pytest.fixture
def store(planned_output: PlannedProductionOutput) -> InMemoryPlannedProductionLookup:
    """In-memory lookup holding one entry for VALID_BPNL / VALID_MATERIAL."""
    lookup = InMemoryPlannedProductionLookup()
    lookup.register(VALID_BPNL, VALID_MATERIAL, planned_output)
    return lookup
