"""Domain layer: tags, value objects, persistent entities and properties."""
