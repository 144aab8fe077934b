"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
All driver ports are replaced with recording fakes from tests/fakes/.
"""
