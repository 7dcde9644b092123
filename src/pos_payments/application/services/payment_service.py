from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from pos_payments.application.dtos import PaymentDetails
from pos_payments.domain.entities import Payment, PaymentItem, PaymentType
from pos_payments.domain.exceptions import InvalidPaymentItemError, PaymentServiceError

if TYPE_CHECKING:
    from datetime import date

    from pos_payments.application.dtos import NewPaymentCommand, NewPaymentItemCommand
    from pos_payments.application.ports import (
        CashDeskRepository,
        EmployeeRepository,
        PaymentItemRepository,
        PaymentRepository,
        TimeProvider,
    )

logger = structlog.get_logger(__name__)


class PaymentService:
    """Business rules for payments made at the cash desks.

    Responsibilities:
    - Check that cash desk and employee exist before a payment is created
    - Restrict credit card payments to employees allowed to create them
    - Keep confirmed payments closed for new items
    - Refuse to delete a payment with items unless asked to cascade

    Every rejected operation raises PaymentServiceError. The service never
    commits; each call runs inside the unit of work owned by the caller.
    """

    def __init__(
        self,
        time_provider: TimeProvider,
        cash_desk_repository: CashDeskRepository,
        employee_repository: EmployeeRepository,
        payment_repository: PaymentRepository,
        payment_item_repository: PaymentItemRepository,
    ) -> None:
        self._time_provider = time_provider
        self._cash_desk_repo = cash_desk_repository
        self._employee_repo = employee_repository
        self._payment_repo = payment_repository
        self._item_repo = payment_item_repository

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_payment(self, command: NewPaymentCommand) -> Payment:
        """Create an open payment at a cash desk.

        Validation order: cash desk, employee, payment type, rights.

        Raises:
            PaymentServiceError: On the first failed check.
        """
        cash_desk = self._cash_desk_repo.get(command.cash_desk_number)
        if cash_desk is None:
            raise self._rejected("Invalid cash desk", cash_desk_number=command.cash_desk_number)

        employee = self._employee_repo.get(command.employee_registration_number)
        if employee is None:
            raise self._rejected(
                "Invalid employee",
                employee_registration_number=command.employee_registration_number,
            )

        payment_type = PaymentType.from_name(command.payment_type)
        if payment_type is None:
            raise self._rejected("Invalid payment type", payment_type=command.payment_type)

        if payment_type == PaymentType.CREDIT_CARD and not employee.can_create_credit_card_payments:
            raise self._rejected(
                "Insufficient rights to create a credit card payment.",
                employee_registration_number=employee.registration_number,
                role=employee.role.value,
            )

        payment = self._payment_repo.add(
            Payment.open(
                cash_desk_number=cash_desk.number,
                employee_registration_number=employee.registration_number,
                payment_type=payment_type,
                created_at=self._time_provider.now(),
            )
        )
        logger.info(
            "payment_created",
            payment_id=payment.id,
            cash_desk_number=payment.cash_desk_number,
            payment_type=payment.payment_type.value,
        )
        return payment

    def confirm_payment(self, payment_id: int) -> Payment:
        """Confirm an open payment.

        Raises:
            PaymentServiceError: Payment not found (not_found=True) or
                already confirmed.
        """
        payment = self._get_payment(payment_id)
        if payment.is_confirmed:
            raise self._rejected("Payment already confirmed.", payment_id=payment_id)

        confirmed = payment.confirm(self._time_provider.now())
        self._payment_repo.save(confirmed)
        logger.info("payment_confirmed", payment_id=payment_id)
        return confirmed

    def add_payment_item(self, command: NewPaymentItemCommand) -> PaymentItem:
        """Add a line item to an open payment.

        Raises:
            PaymentServiceError: Payment not found (not_found=True), already
                confirmed, or the item values are invalid.
        """
        payment = self._get_payment(command.payment_id)
        if payment.is_confirmed:
            raise self._rejected("Payment already confirmed.", payment_id=command.payment_id)

        try:
            item = PaymentItem.create(
                payment_id=command.payment_id,
                description=command.description,
                quantity=command.quantity,
                unit_price=command.unit_price,
            )
        except InvalidPaymentItemError as e:
            raise self._rejected(str(e), payment_id=command.payment_id) from e

        item = self._item_repo.add(item)
        logger.info("payment_item_added", payment_id=command.payment_id, item_id=item.id)
        return item

    def delete_payment(self, payment_id: int, *, cascade: bool) -> None:
        """Delete a payment.

        Args:
            payment_id: The payment to delete.
            cascade: Must be True to delete a payment that still has items;
                its items are removed first.

        Raises:
            PaymentServiceError: Payment not found (not_found=True), or it
                has items and cascade is False.
        """
        self._get_payment(payment_id)

        items = self._item_repo.list_by_payment(payment_id)
        if items and not cascade:
            raise self._rejected(
                "Payment has payment items.", payment_id=payment_id, item_count=len(items)
            )

        removed_items = self._item_repo.remove_by_payment(payment_id) if items else 0
        self._payment_repo.remove(payment_id)
        logger.info("payment_deleted", payment_id=payment_id, removed_items=removed_items)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_payment(self, payment_id: int) -> PaymentDetails:
        payment = self._get_payment(payment_id)
        items = self._item_repo.list_by_payment(payment_id)
        return PaymentDetails(payment=payment, items=tuple(items))

    def list_payments(
        self,
        cash_desk_number: int | None = None,
        date_from: date | None = None,
    ) -> list[Payment]:
        return self._payment_repo.list(cash_desk_number=cash_desk_number, date_from=date_from)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _get_payment(self, payment_id: int) -> Payment:
        payment = self._payment_repo.get(payment_id)
        if payment is None:
            logger.info("payment_service_rejected", reason="not_found", payment_id=payment_id)
            raise PaymentServiceError.payment_not_found()
        return payment

    @staticmethod
    def _rejected(message: str, **context: object) -> PaymentServiceError:
        logger.info("payment_service_rejected", reason=message, **context)
        return PaymentServiceError(message)
