"""HTTP surface for the PlannedProduction exchange."""
