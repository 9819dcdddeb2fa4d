"""User API adapters."""
