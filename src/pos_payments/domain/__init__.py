"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., Payment, PaymentItem)
- Enumerations: PaymentType, PaymentStatus, EmployeeRole
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
