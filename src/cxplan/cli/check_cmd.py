"""CLI command for checking request identifiers offline.

Runs the HTTP endpoint's gateway against a lookup that accepts every
request, so only the validation gate decides the outcome.

Usage:
    cxplan check --partner BPNL1234567890AB --material urn:uuid:123e4567-...
    cxplan check -p BPNL1234567890AB -m 123e4567-... -r json --format json
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import typer
from rich.console import Console

from cxplan.core.gateway import PlannedProductionGateway, RejectionReason, ResponseClass
from cxplan.core.model import PlannedProductionOutput
from cxplan.core.patterns import REPLACED_INVALID_REPRESENTATION, REPRESENTATION_VALUE
from cxplan.core.validation import (
    is_display_safe,
    is_valid_material_identifier,
    is_valid_partner_identifier,
    is_valid_representation,
)
from cxplan.observability.metrics import disabled_metrics

app = typer.Typer(help="Check PlannedProduction request identifiers")


class _DryRunLookup:
    async def lookup(
        self, partner_bpnl: str, material_number_cx: str
    ) -> PlannedProductionOutput:
        return PlannedProductionOutput()


class _SilentDiagnostics:
    def emit(self, reason: RejectionReason, **fields: Any) -> None:
        return None


def classify(partner: str, material: str, representation: str) -> ResponseClass | None:
    """Return the rejection class for a request, or None if it would be looked up."""
    gateway = PlannedProductionGateway(
        _DryRunLookup(),
        diagnostics=_SilentDiagnostics(),
        metrics=disabled_metrics(),
    )
    result = asyncio.run(gateway.handle_request(partner, material, representation))
    if result.response_class is ResponseClass.OK:
        return None
    return result.response_class


@app.callback(invoke_without_command=True)
def check(
    partner: str = typer.Option(..., "--partner", "-p", help="Partner BPNL"),
    material: str = typer.Option(..., "--material", "-m", help="Material number CX"),
    representation: str = typer.Option(
        REPRESENTATION_VALUE,
        "--representation",
        "-r",
        help="Representation path segment",
    ),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text, json",
    ),
) -> None:
    """Check identifiers against the request grammars.

    Exits with code 1 when the request would be rejected.
    """
    console = Console()
    rejection = classify(partner, material, representation)
    shown_representation = (
        representation if is_display_safe(representation) else REPLACED_INVALID_REPRESENTATION
    )

    if output_format == "json":
        typer.echo(
            json.dumps(
                {
                    "partner": is_valid_partner_identifier(partner),
                    "material": is_valid_material_identifier(material),
                    "representation": shown_representation,
                    "accepted": rejection is None,
                    "status": rejection.status_code if rejection else None,
                },
                indent=2,
            )
        )
    else:
        console.print(_mark(is_valid_partner_identifier(partner), "Partner BPNL"))
        console.print(_mark(is_valid_material_identifier(material), "Material number CX"))
        console.print(
            _mark(is_valid_representation(representation), "Representation"),
            shown_representation,
            markup=False,
            emoji=False,
            highlight=False,
        )
        console.print()
        if rejection is None:
            console.print("[green]Accepted:[/green] request would be passed to the lookup")
        else:
            console.print(f"[red]Rejected:[/red] {rejection.label} ({rejection.status_code})")

    if rejection is not None:
        raise typer.Exit(code=1)


def _mark(ok: bool, label: str) -> str:
    return f"{'✓' if ok else '✗'} {label}"
