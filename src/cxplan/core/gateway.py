"""Dispatch for PlannedProduction submodel requests.

The decision is linear and ordered:

1. Partner BPNL and material number must both match their grammars,
   otherwise BadRequest (400). Nothing else is evaluated.
2. The representation must be exactly ``$value``, otherwise
   NotImplemented (501). The lookup is not called.
3. The lookup collaborator is called. No value (or a failure inside the
   collaborator) maps to InternalError (500), a value maps to Ok (200).

The gateway holds no per-request state, so one instance serves concurrent
requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from cxplan.core.model import PlannedProductionOutput
from cxplan.core.patterns import REPLACED_INVALID_REPRESENTATION
from cxplan.core.validation import IdentifierValidator
from cxplan.observability.metrics import MetricsRegistry, get_metrics

if TYPE_CHECKING:
    from cxplan.services.lookup import PlannedProductionLookup

logger = logging.getLogger(__name__)


class ResponseClass(Enum):
    """The four outcomes of a PlannedProduction request."""

    OK = ("Ok", 200)
    BAD_REQUEST = ("BadRequest", 400)
    INTERNAL_ERROR = ("InternalError", 500)
    NOT_IMPLEMENTED = ("NotImplemented", 501)

    def __init__(self, label: str, status_code: int) -> None:
        self.label = label
        self.status_code = status_code


class RejectionReason(str, Enum):
    """Reason codes attached to rejection diagnostics."""

    MALFORMED_IDENTIFIER = "MalformedIdentifier"
    UNSUPPORTED_REPRESENTATION = "UnsupportedRepresentation"
    LOOKUP_UNAVAILABLE = "LookupUnavailable"


@dataclass(frozen=True)
class GatewayResponse:
    response_class: ResponseClass
    body: PlannedProductionOutput | None = None

    @property
    def status_code(self) -> int:
        return self.response_class.status_code


class DiagnosticSink(Protocol):
    """Receiver for rejection diagnostics."""

    def emit(self, reason: RejectionReason, **fields: Any) -> None: ...


class LoggingDiagnosticSink:
    """Emit diagnostics as WARNING log records and rejection counters."""

    def __init__(
        self,
        logger_: logging.Logger | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self._logger = logger_ or logger
        self._metrics = metrics or get_metrics()

    def emit(self, reason: RejectionReason, **fields: Any) -> None:
        self._metrics.planned_production_rejections_total.labels(reason=reason.value).inc()
        self._logger.warning(
            f"Rejecting request at PlannedProduction Submodel request 2.0.0 endpoint: "
            f"{reason.value}",
            extra={"reason": reason.value, **fields},
        )


class PlannedProductionGateway:
    """Validate a request, call the lookup and classify the outcome.

    Args:
        lookup: Collaborator producing the submodel for validated identifiers
        validator: Identifier predicates (default: IdentifierValidator)
        diagnostics: Receiver for rejection diagnostics (default: logging)
        metrics: Registry for outcome counters (default: global registry)
    """

    def __init__(
        self,
        lookup: PlannedProductionLookup,
        validator: IdentifierValidator | None = None,
        diagnostics: DiagnosticSink | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        self.lookup = lookup
        self.validator = validator or IdentifierValidator()
        self.metrics = metrics or get_metrics()
        self.diagnostics = diagnostics or LoggingDiagnosticSink(metrics=self.metrics)

    async def handle_request(
        self,
        partner_bpnl: str,
        material_number_cx: str,
        representation: str,
    ) -> GatewayResponse:
        """Classify a PlannedProduction request.

        Args:
            partner_bpnl: Caller's BPNL (from the EDC header)
            material_number_cx: Material number CX from the path
            representation: Representation path segment

        Returns:
            GatewayResponse with the response class and, for Ok, the payload
        """
        response = await self._dispatch(partner_bpnl, material_number_cx, representation)
        self.metrics.planned_production_responses_total.labels(
            response_class=response.response_class.label
        ).inc()
        return response

    async def _dispatch(
        self,
        partner_bpnl: str,
        material_number_cx: str,
        representation: str,
    ) -> GatewayResponse:
        if not self.validator.is_valid_partner_identifier(
            partner_bpnl
        ) or not self.validator.is_valid_material_identifier(material_number_cx):
            self.diagnostics.emit(RejectionReason.MALFORMED_IDENTIFIER)
            return GatewayResponse(ResponseClass.BAD_REQUEST)

        if not self.validator.is_valid_representation(representation):
            if not self.validator.is_display_safe(representation):
                representation = REPLACED_INVALID_REPRESENTATION
            self.diagnostics.emit(
                RejectionReason.UNSUPPORTED_REPRESENTATION,
                representation=representation,
            )
            return GatewayResponse(ResponseClass.NOT_IMPLEMENTED)

        try:
            output = await self.lookup.lookup(partner_bpnl, material_number_cx)
        except Exception:
            logger.exception("PlannedProduction lookup failed")
            output = None

        if output is None:
            self.diagnostics.emit(RejectionReason.LOOKUP_UNAVAILABLE)
            return GatewayResponse(ResponseClass.INTERNAL_ERROR)

        return GatewayResponse(ResponseClass.OK, output)
