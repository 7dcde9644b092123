"""Application layer - Services and port definitions.

This layer contains:
- Services: The payment service enforcing the cash desk business rules
- Ports: Abstract interfaces for repositories and the clock
- DTOs: Commands and read models for service input/output

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
