"""Domain entities - Objects with identity and lifecycle."""

from pos_payments.domain.entities.cash_desk import CashDesk
from pos_payments.domain.entities.employee import Employee, EmployeeRole
from pos_payments.domain.entities.payment import Payment, PaymentStatus, PaymentType
from pos_payments.domain.entities.payment_item import PaymentItem

__all__ = [
    "CashDesk",
    "Employee",
    "EmployeeRole",
    "Payment",
    "PaymentItem",
    "PaymentStatus",
    "PaymentType",
]
