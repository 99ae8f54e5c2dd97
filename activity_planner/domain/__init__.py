"""Domain layer: entities, scoring rules and repository interfaces."""
