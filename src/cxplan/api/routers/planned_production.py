"""PlannedProduction Submodel 2.0.0 request endpoint.

GET /planned-production/request/{materialnumbercx}/{representation}

The calling partner's BPNL arrives in the header configured by
``partner_header`` (``edc-bpn`` by default), set by the EDC data plane.
Rejections carry no body:

- 400 malformed BPNL or material number
- 500 no PlannedProduction available
- 501 representation other than ``$value``
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import ORJSONResponse

from cxplan.api.deps import get_gateway
from cxplan.core.gateway import PlannedProductionGateway, ResponseClass

router = APIRouter(prefix="/planned-production", tags=["planned-production"])


@router.get(
    "/request/{materialnumbercx}/{representation}",
    summary="This endpoint receives the PlannedProduction Submodel 2.0.0 requests",
    responses={
        200: {"description": "Ok"},
        400: {"description": "Bad Request"},
        500: {"description": "Internal Server Error"},
        501: {"description": "Unsupported representation"},
    },
)
async def get_planned_production(
    request: Request,
    materialnumbercx: str,
    representation: str,
    gateway: Annotated[PlannedProductionGateway, Depends(get_gateway)],
) -> Response:
    """Return the PlannedProduction submodel for the calling partner."""
    # A missing header is a malformed identifier, not a framework 422
    partner_bpnl = request.headers.get(request.app.state.partner_header, "")

    result = await gateway.handle_request(partner_bpnl, materialnumbercx, representation)

    if result.response_class is ResponseClass.OK and result.body is not None:
        return ORJSONResponse(content=result.body.to_json_dict())
    return Response(status_code=result.status_code)
