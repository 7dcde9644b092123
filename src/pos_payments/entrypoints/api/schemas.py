"""Pydantic schemas for API request/response models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from pos_payments.application.dtos import PaymentDetails
    from pos_payments.domain.entities import Payment, PaymentItem


class CreatePaymentRequest(BaseModel):
    """Request schema for creating a payment."""

    cash_desk_number: int = Field(..., description="Number of the cash desk")
    payment_type: str = Field(..., description="Payment type name, e.g. Cash or CreditCard")
    employee_registration_number: int = Field(
        ..., description="Registration number of the employee creating the payment"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"cash_desk_number": 1, "payment_type": "Cash", "employee_registration_number": 1}
            ]
        }
    }


class AddPaymentItemRequest(BaseModel):
    """Request schema for adding an item to an open payment."""

    description: str = Field(..., min_length=1, max_length=255, description="Article description")
    quantity: int = Field(..., gt=0, description="Number of units")
    unit_price: Decimal = Field(
        ..., ge=0, max_digits=10, decimal_places=2, description="Unit price"
    )


class PaymentResponse(BaseModel):
    """Response schema for a payment without its items."""

    id: int
    cash_desk_number: int
    employee_registration_number: int
    payment_type: str
    status: str
    created_at: datetime
    confirmed_at: datetime | None = None

    @classmethod
    def from_entity(cls, payment: Payment) -> PaymentResponse:
        return cls(
            id=payment.id,
            cash_desk_number=payment.cash_desk_number,
            employee_registration_number=payment.employee_registration_number,
            payment_type=payment.payment_type.value,
            status=payment.status.value,
            created_at=payment.created_at,
            confirmed_at=payment.confirmed_at,
        )


class PaymentItemResponse(BaseModel):
    """Response schema for a payment item."""

    id: int
    payment_id: int
    description: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal

    @classmethod
    def from_entity(cls, item: PaymentItem) -> PaymentItemResponse:
        return cls(
            id=item.id,
            payment_id=item.payment_id,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=item.line_total,
        )


class PaymentDetailsResponse(PaymentResponse):
    """Response schema for a single payment including items and total."""

    items: list[PaymentItemResponse] = Field(default_factory=list)
    total: Decimal = Decimal("0")

    @classmethod
    def from_details(cls, details: PaymentDetails) -> PaymentDetailsResponse:
        base = PaymentResponse.from_entity(details.payment)
        return cls(
            **base.model_dump(),
            items=[PaymentItemResponse.from_entity(item) for item in details.items],
            total=details.total,
        )


class HealthCheckResponse(BaseModel):
    status: str
