"""Request validation and dispatch for the PlannedProduction endpoint."""

from cxplan.core.gateway import (
    DiagnosticSink,
    GatewayResponse,
    LoggingDiagnosticSink,
    PlannedProductionGateway,
    RejectionReason,
    ResponseClass,
)
from cxplan.core.validation import (
    IdentifierValidator,
    is_display_safe,
    is_valid_material_identifier,
    is_valid_partner_identifier,
    is_valid_representation,
)

__all__ = [
    "DiagnosticSink",
    "GatewayResponse",
    "IdentifierValidator",
    "LoggingDiagnosticSink",
    "PlannedProductionGateway",
    "RejectionReason",
    "ResponseClass",
    "is_display_safe",
    "is_valid_material_identifier",
    "is_valid_partner_identifier",
    "is_valid_representation",
]
