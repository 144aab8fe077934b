"""Command-line interface adapters.

Provides CLI commands for operating the Dispatch system:
- schedule: Queue an order for delivery
- deliver: Send drivers out with all pending orders
- refuel: Refuel every car in the fleet
- status: Report on drivers and pending orders
- accept: Open or close the shop for new orders
"""
