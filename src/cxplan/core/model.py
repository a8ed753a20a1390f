"""PlannedProduction 2.0.0 aspect model.

Semantic ID: urn:samm:io.catenax.planned_production_output:2.0.0#PlannedProductionOutput

The gateway treats this payload as opaque; the models exist so that the
lookup collaborator and the HTTP layer agree on one serialisable shape.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Final

from pydantic import BaseModel, Field

SEMANTIC_ID: Final[str] = (
    "urn:samm:io.catenax.planned_production_output:2.0.0#PlannedProductionOutput"
)


class AspectModel(BaseModel):
    """Base model for SAMM aspect payloads (camelCase on the wire)."""

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

    def to_json_dict(self) -> dict[str, Any]:
        """Serialise to the JSON structure sent to partners."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


class Quantity(AspectModel):
    """Quantity with a unit from the Catena-X unit catalogue, e.g. unit:piece."""

    value: float = Field(..., ge=0)
    unit: str = Field(..., min_length=1)


class OrderPositionReference(AspectModel):
    """Reference to the order position a production output is allocated to."""

    supplier_order_id: str | None = Field(default=None, alias="supplierOrderId")
    customer_order_id: str | None = Field(default=None, alias="customerOrderId")
    customer_order_position_id: str | None = Field(
        default=None, alias="customerOrderPositionId"
    )


class AllocatedPlannedProductionOutput(AspectModel):
    planned_production_quantity: Quantity = Field(..., alias="plannedProductionQuantity")
    estimated_time_of_completion: datetime = Field(..., alias="estimatedTimeOfCompletion")
    last_updated_on_date_time: datetime | None = Field(
        default=None, alias="lastUpdatedOnDateTime"
    )


class Position(AspectModel):
    order_position_reference: OrderPositionReference | None = Field(
        default=None, alias="orderPositionReference"
    )
    allocated_planned_production_outputs: list[AllocatedPlannedProductionOutput] = Field(
        default_factory=list, alias="allocatedPlannedProductionOutputs"
    )


class PlannedProductionOutput(AspectModel):
    """Planned production of one material for one partner."""

    material_global_asset_id: str | None = Field(default=None, alias="materialGlobalAssetId")
    positions: list[Position] = Field(default_factory=list)
