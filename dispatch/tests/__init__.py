"""Test suite for the Dispatch delivery system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses recording fakes for ports

2. adapters/: Tests for adapter implementations
   - Validates simulated driver behavior

3. fakes/: Port implementations for testing
   - Recording implementations of DeliveryDriverPort and DeliveryPort
   - Used by core unit tests and CLI tests
"""
