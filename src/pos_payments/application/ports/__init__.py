"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from pos_payments.application.ports.payment_item_repository import PaymentItemRepository
from pos_payments.application.ports.payment_repository import PaymentRepository
from pos_payments.application.ports.staff_repositories import (
    CashDeskRepository,
    EmployeeRepository,
)
from pos_payments.application.ports.time_provider import TimeProvider

__all__ = [
    "CashDeskRepository",
    "EmployeeRepository",
    "PaymentItemRepository",
    "PaymentRepository",
    "TimeProvider",
]
