"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: SQLAlchemy ORM records, repositories and session wiring
- In-memory repositories for unit tests
- Time Provider: Clock abstraction for testability
- Logging configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from pos_payments.infrastructure.in_memory import (
    InMemoryCashDeskRepository,
    InMemoryEmployeeRepository,
    InMemoryPaymentItemRepository,
    InMemoryPaymentRepository,
)
from pos_payments.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryCashDeskRepository",
    "InMemoryEmployeeRepository",
    "InMemoryPaymentItemRepository",
    "InMemoryPaymentRepository",
    "SystemTimeProvider",
]
