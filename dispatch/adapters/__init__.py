"""External adapters for the Dispatch delivery system.

This package provides implementations of the core port interfaces
and the user-facing entry points.

Adapter Organization:

- driver/: Delivery driver implementations (simulated fleet)
- cli/: Command-line interface for scheduling and running deliveries
"""
