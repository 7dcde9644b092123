"""Data Transfer Objects for payment service input/output."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos_payments.domain.entities import Payment, PaymentItem


@dataclass(frozen=True, slots=True)
class NewPaymentCommand:
    """Input DTO for PaymentService.create_payment()."""

    cash_desk_number: int
    payment_type: str
    employee_registration_number: int


@dataclass(frozen=True, slots=True)
class NewPaymentItemCommand:
    """Input DTO for PaymentService.add_payment_item()."""

    description: str
    quantity: int
    unit_price: Decimal
    payment_id: int


@dataclass(frozen=True, slots=True)
class PaymentDetails:
    """Output DTO: a payment together with its items."""

    payment: Payment
    items: tuple[PaymentItem, ...]

    @property
    def total(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))
