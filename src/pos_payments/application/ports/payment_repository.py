from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from pos_payments.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for payment persistence.

    Contract:
    - get() returns None if payment does not exist (no exception)
    - add() assigns the id; the passed entity must have id=None
    - save() updates an existing payment; the id never changes
    - Implementations do not commit; the unit of work is owned by the caller
    """

    @abstractmethod
    def get(self, payment_id: int) -> Payment | None:
        """Retrieve a payment by ID.

        Args:
            payment_id: The payment identifier.

        Returns:
            The Payment entity if found, None otherwise.
        """

    @abstractmethod
    def add(self, payment: Payment) -> Payment:
        """Persist a new payment.

        Args:
            payment: The payment entity to add (id=None).

        Returns:
            The stored payment carrying its assigned id.
        """

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """Update an existing payment.

        Args:
            payment: The payment entity to save. payment.id must be set.
        """

    @abstractmethod
    def remove(self, payment_id: int) -> None:
        """Remove a payment. Its items must have been removed already."""

    @abstractmethod
    def list(
        self,
        cash_desk_number: int | None = None,
        date_from: date | None = None,
    ) -> list[Payment]:
        """List payments ordered by id.

        Args:
            cash_desk_number: Only payments made at this cash desk.
            date_from: Only payments created on or after this (UTC) date.
                Compared by date only; the time of day is ignored.
        """
