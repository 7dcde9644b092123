"""API routes for cash desk payments."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Query, Response, status
from sqlalchemy import text

from pos_payments.application.dtos import NewPaymentCommand, NewPaymentItemCommand
from pos_payments.entrypoints.api.dependencies import PaymentServiceDep, SessionDep
from pos_payments.entrypoints.api.schemas import (
    AddPaymentItemRequest,
    CreatePaymentRequest,
    HealthCheckResponse,
    PaymentDetailsResponse,
    PaymentItemResponse,
    PaymentResponse,
)

payment_router = APIRouter(prefix="/api/payments", tags=["payments"])
monitoring_router = APIRouter(tags=["monitoring"])


@payment_router.get("", response_model=list[PaymentResponse], summary="List payments")
def list_payments(
    service: PaymentServiceDep,
    cash_desk: Annotated[int | None, Query(alias="cashDesk")] = None,
    date_from: Annotated[date | None, Query(alias="dateFrom")] = None,
) -> list[PaymentResponse]:
    """List payments, optionally filtered by cash desk and minimum date (inclusive)."""
    payments = service.list_payments(cash_desk_number=cash_desk, date_from=date_from)
    return [PaymentResponse.from_entity(payment) for payment in payments]


@payment_router.get(
    "/{payment_id}", response_model=PaymentDetailsResponse, summary="Get a payment"
)
def get_payment(payment_id: int, service: PaymentServiceDep) -> PaymentDetailsResponse:
    return PaymentDetailsResponse.from_details(service.get_payment(payment_id))


@payment_router.post(
    "",
    response_model=PaymentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a payment",
)
def create_payment(request: CreatePaymentRequest, service: PaymentServiceDep) -> PaymentResponse:
    payment = service.create_payment(
        NewPaymentCommand(
            cash_desk_number=request.cash_desk_number,
            payment_type=request.payment_type,
            employee_registration_number=request.employee_registration_number,
        )
    )
    return PaymentResponse.from_entity(payment)


@payment_router.post(
    "/{payment_id}/items",
    response_model=PaymentItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an item to an open payment",
)
def add_payment_item(
    payment_id: int, request: AddPaymentItemRequest, service: PaymentServiceDep
) -> PaymentItemResponse:
    item = service.add_payment_item(
        NewPaymentItemCommand(
            description=request.description,
            quantity=request.quantity,
            unit_price=request.unit_price,
            payment_id=payment_id,
        )
    )
    return PaymentItemResponse.from_entity(item)


@payment_router.patch(
    "/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Confirm a payment"
)
def confirm_payment(payment_id: int, service: PaymentServiceDep) -> Response:
    service.confirm_payment(payment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@payment_router.delete(
    "/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a payment"
)
def delete_payment(
    payment_id: int,
    service: PaymentServiceDep,
    delete_items: Annotated[bool, Query(alias="deleteItems")] = False,
) -> Response:
    """Delete a payment; deleteItems=true is required when it still has items."""
    service.delete_payment(payment_id, cascade=delete_items)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@monitoring_router.get("/health", response_model=HealthCheckResponse, summary="Health check")
def health(session: SessionDep) -> HealthCheckResponse:
    session.execute(text("SELECT 1"))
    return HealthCheckResponse(status="ok")
