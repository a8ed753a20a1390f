"""Shared FastAPI dependencies for cxplan routers."""

from __future__ import annotations

from fastapi import Request

from cxplan.core.gateway import PlannedProductionGateway


def get_gateway(request: Request) -> PlannedProductionGateway:
    """FastAPI dependency returning the gateway wired in create_app."""
    return request.app.state.gateway
