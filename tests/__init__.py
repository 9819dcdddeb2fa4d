"""Test suite for railway-result.

- unit/: Unit tests for the Result core, its extensions, and the
  reference user repository built on top of them.
"""
