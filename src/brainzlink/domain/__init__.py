"""Domain layer: entities, value objects, exceptions and the entity catalogue."""
