"""Payment entity with state machine behavior."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from pos_payments.domain.exceptions import InvalidStateTransitionError

if TYPE_CHECKING:
    from datetime import datetime


class PaymentType(Enum):
    """Means of payment accepted at a cash desk."""

    CASH = "Cash"
    MAESTRO = "Maestro"
    CREDIT_CARD = "CreditCard"

    @classmethod
    def from_name(cls, name: str) -> PaymentType | None:
        """Parse a payment type name ("Cash", "CreditCard", ...).

        Matching is exact and case-sensitive. Returns None for unknown names.
        """
        for payment_type in cls:
            if payment_type.value == name:
                return payment_type
        return None


class PaymentStatus(Enum):
    """Payment lifecycle states."""

    OPEN = "Open"
    CONFIRMED = "Confirmed"


@dataclass(frozen=True, slots=True)
class Payment:
    """Payment entity with state machine behavior.

    Payment is immutable (frozen dataclass). All state-changing methods
    return a new Payment instance.

    State machine:
        - open → confirmed (confirm)
        - confirmed is terminal (no further transitions)

    The status is tracked explicitly; confirmed_at only records when the
    transition happened.

    id is None until the payment has been added to a repository.
    """

    id: int | None
    cash_desk_number: int
    employee_registration_number: int
    payment_type: PaymentType
    created_at: datetime
    status: PaymentStatus
    confirmed_at: datetime | None

    @classmethod
    def open(
        cls,
        cash_desk_number: int,
        employee_registration_number: int,
        payment_type: PaymentType,
        created_at: datetime,
    ) -> Payment:
        """Factory method for a new, not yet persisted, open payment."""
        return cls(
            id=None,
            cash_desk_number=cash_desk_number,
            employee_registration_number=employee_registration_number,
            payment_type=payment_type,
            created_at=created_at,
            status=PaymentStatus.OPEN,
            confirmed_at=None,
        )

    @property
    def is_confirmed(self) -> bool:
        return self.status == PaymentStatus.CONFIRMED

    def confirm(self, now: datetime) -> Payment:
        """Confirm the payment, closing it for further item changes.

        Args:
            now: Current timestamp (UTC).

        Returns:
            New Payment instance in CONFIRMED state.

        Raises:
            InvalidStateTransitionError: If not in OPEN state.
        """
        if self.status != PaymentStatus.OPEN:
            raise InvalidStateTransitionError(
                f"Cannot confirm payment in state {self.status.value}; "
                f"must be in {PaymentStatus.OPEN.value} state"
            )

        return replace(self, status=PaymentStatus.CONFIRMED, confirmed_at=now)
