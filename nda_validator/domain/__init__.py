"""Domain layer: schema entities and the pure validation services."""
