"""Tests for adapter implementations.

These tests exercise adapters to validate they honour the core
port contracts.
"""
