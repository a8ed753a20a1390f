"""Lookup collaborators producing PlannedProduction submodels."""

from cxplan.services.lookup import (
    BlockingLookupAdapter,
    InMemoryPlannedProductionLookup,
    PlannedProductionLookup,
    SeedFileError,
)

__all__ = [
    "BlockingLookupAdapter",
    "InMemoryPlannedProductionLookup",
    "PlannedProductionLookup",
    "SeedFileError",
]
