"""Logging adapters."""
