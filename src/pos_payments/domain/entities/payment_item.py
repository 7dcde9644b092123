from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pos_payments.domain.exceptions import InvalidPaymentItemError

CENT = Decimal("0.01")
MAX_UNIT_PRICE = Decimal("99999999.99")


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """Line item of a payment.

    Use the create() factory method to construct instances with validation.
    id is None until the item has been added to a repository.
    """

    id: int | None
    payment_id: int
    description: str
    quantity: int
    unit_price: Decimal

    @classmethod
    def create(
        cls,
        payment_id: int,
        description: str,
        quantity: int,
        unit_price: Decimal,
    ) -> PaymentItem:
        """Factory method to create a PaymentItem with validation.

        Args:
            payment_id: The payment this item belongs to.
            description: Article description, surrounding whitespace is trimmed.
            quantity: Number of units, must be greater than 0.
            unit_price: Price of one unit: finite, not negative, at most
                MAX_UNIT_PRICE and in whole cents.

        Returns:
            A new PaymentItem instance.

        Raises:
            InvalidPaymentItemError: If any value fails validation.
        """
        description = description.strip()
        if not description:
            raise InvalidPaymentItemError("Payment item description cannot be empty")

        if quantity <= 0:
            raise InvalidPaymentItemError(
                f"Payment item quantity must be greater than 0, got {quantity}"
            )

        unit_price = Decimal(unit_price)
        if not unit_price.is_finite():
            raise InvalidPaymentItemError(
                f"Payment item price must be a finite number, got {unit_price}"
            )

        if unit_price < 0:
            raise InvalidPaymentItemError(
                f"Payment item price cannot be negative, got {unit_price}"
            )

        if unit_price > MAX_UNIT_PRICE:
            raise InvalidPaymentItemError(
                f"Payment item price cannot exceed {MAX_UNIT_PRICE}, got {unit_price}"
            )

        # Stored as NUMERIC(10, 2); sub-cent prices would be truncated.
        if unit_price != unit_price.quantize(CENT):
            raise InvalidPaymentItemError(
                f"Payment item price cannot have more than 2 decimal places, got {unit_price}"
            )

        return cls(
            id=None,
            payment_id=payment_id,
            description=description,
            quantity=quantity,
            unit_price=unit_price,
        )

    @property
    def line_total(self) -> Decimal:
        return self.unit_price * self.quantity
