"""Domain layer: entities, errors and ports used by the reference consumer."""
