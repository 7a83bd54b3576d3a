"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Session issuance and checks, charges, vendor onboarding
- Ports: Abstract interfaces for the datastore, gateway, tokens and clock
- DTOs: Request parsing and response shapes for the use cases

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
