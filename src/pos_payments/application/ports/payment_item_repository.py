from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos_payments.domain.entities import PaymentItem


class PaymentItemRepository(ABC):
    """Port for payment item persistence.

    Items are only ever added one by one or removed together with
    their payment, so the port is kept to those operations.
    """

    @abstractmethod
    def add(self, item: PaymentItem) -> PaymentItem:
        """Persist a new item and return it carrying its assigned id."""

    @abstractmethod
    def list_by_payment(self, payment_id: int) -> list[PaymentItem]:
        """Return the items of a payment ordered by id."""

    @abstractmethod
    def remove_by_payment(self, payment_id: int) -> int:
        """Remove all items of a payment.

        Returns:
            Number of removed items.
        """
