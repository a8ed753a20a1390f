"""cxplan: Catena-X PlannedProduction submodel exchange endpoint."""

__version__ = "0.1.0"
