"""PlannedProduction lookup collaborators.

The gateway only talks to the ``PlannedProductionLookup`` protocol. Callers
pass identifiers that have already passed the validation gate, so
implementations do not re-check identifier syntax.

Seed file format for ``InMemoryPlannedProductionLookup.from_file``::

    [
        {
            "partnerBpnl": "BPNL1234567890AB",
            "materialNumberCx": "urn:uuid:123e4567-e89b-12d3-a456-426614174000",
            "output": {"materialGlobalAssetId": "...", "positions": [...]}
        }
    ]
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from pathlib import Path
from typing import Protocol, runtime_checkable

import anyio.to_thread
import orjson
from pydantic import ValidationError

from cxplan.core.model import PlannedProductionOutput

logger = logging.getLogger(__name__)


class SeedFileError(ValueError):
    """Seed file could not be read or does not match the expected format."""


@runtime_checkable
class PlannedProductionLookup(Protocol):
    """Source of PlannedProduction submodels for a partner and material."""

    async def lookup(
        self, partner_bpnl: str, material_number_cx: str
    ) -> PlannedProductionOutput | None:
        """Return the submodel, or None when no value can be produced."""
        ...


class InMemoryPlannedProductionLookup:
    """Dictionary-backed lookup keyed by (partner BPNL, material number CX)."""

    def __init__(self) -> None:
        self._outputs: dict[tuple[str, str], PlannedProductionOutput] = {}

    def __len__(self) -> int:
        return len(self._outputs)

    def register(
        self,
        partner_bpnl: str,
        material_number_cx: str,
        output: PlannedProductionOutput,
    ) -> None:
        self._outputs[(partner_bpnl, material_number_cx)] = output

    def remove(self, partner_bpnl: str, material_number_cx: str) -> bool:
        """Remove an entry. Returns True if something was removed."""
        return self._outputs.pop((partner_bpnl, material_number_cx), None) is not None

    async def lookup(
        self, partner_bpnl: str, material_number_cx: str
    ) -> PlannedProductionOutput | None:
        output = self._outputs.get((partner_bpnl, material_number_cx))
        if output is None:
            logger.debug("No PlannedProduction registered for requested partner/material")
        return output

    @classmethod
    def from_file(cls, path: Path) -> InMemoryPlannedProductionLookup:
        """Build a store from a JSON seed file.

        Raises:
            SeedFileError: If the file is unreadable or malformed
        """
        try:
            raw = orjson.loads(Path(path).read_bytes())
        except (OSError, orjson.JSONDecodeError) as e:
            raise SeedFileError(f"Cannot read seed file {path}: {e}") from e

        if not isinstance(raw, list):
            raise SeedFileError("Seed file must contain a JSON array")

        store = cls()
        for index, entry in enumerate(raw):
            if not isinstance(entry, dict):
                raise SeedFileError(f"Seed entry {index} is not an object")
            partner = entry.get("partnerBpnl")
            material = entry.get("materialNumberCx")
            if not isinstance(partner, str) or not isinstance(material, str):
                raise SeedFileError(
                    f"Seed entry {index} requires 'partnerBpnl' and 'materialNumberCx'"
                )
            try:
                output = PlannedProductionOutput.model_validate(entry.get("output", {}))
            except ValidationError as e:
                raise SeedFileError(f"Seed entry {index} has an invalid output: {e}") from e
            store.register(partner, material, output)

        logger.info(f"Loaded {len(store)} PlannedProduction entries from {path}")
        return store


class BlockingLookupAdapter:
    """Run a synchronous lookup function in a worker thread.

    Keeps slow backends (database drivers, HTTP clients without async
    support) from blocking the event loop.
    """

    def __init__(self, func: Callable[[str, str], PlannedProductionOutput | None]) -> None:
        self._func = func

    async def lookup(
        self, partner_bpnl: str, material_number_cx: str
    ) -> PlannedProductionOutput | None:
        return await anyio.to_thread.run_sync(
            partial(self._func, partner_bpnl, material_number_cx)
        )
