"""
Domain layer.

The domain layer contains the purchase-order business rules.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: The Order aggregate root
- Value Objects: Money, identifiers and order lines
- Domain Events: Facts recorded by the aggregate during mutation
"""
