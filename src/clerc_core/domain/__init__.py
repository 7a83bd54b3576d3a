"""Domain layer - Core business objects and rules.

This layer contains:
- Entities: Store, Vendor and Transaction aggregates
- Value Objects: Fee schedules, secret names, token verification outcomes
- Domain Exceptions: The error taxonomy shared by every layer

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
