"""Infrastructure layer: logging and user API adapters."""
