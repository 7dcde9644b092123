"""SQLAlchemy implementations of the repository ports.

All repositories share the Session they are given. They flush so that
generated ids are available, but never commit: the session owner
(request dependency, test fixture) decides about commit or rollback.
"""

from __future__ import annotations

from datetime import UTC, datetime, time
from typing import TYPE_CHECKING

from sqlalchemy import delete, select

from pos_payments.application.ports import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentItemRepository,
    PaymentRepository,
)
from pos_payments.domain.entities import CashDesk, Employee, Payment, PaymentItem
from pos_payments.infrastructure.orm import (
    CashDeskRecord,
    EmployeeRecord,
    PaymentItemRecord,
    PaymentRecord,
)

if TYPE_CHECKING:
    from datetime import date

    from sqlalchemy.orm import Session


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class SqlAlchemyCashDeskRepository(CashDeskRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, number: int) -> CashDesk | None:
        record = self._session.get(CashDeskRecord, number)
        if record is None:
            return None
        return CashDesk(number=record.number)

    def add(self, cash_desk: CashDesk) -> None:
        self._session.add(CashDeskRecord(number=cash_desk.number))
        self._session.flush()


class SqlAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, registration_number: int) -> Employee | None:
        record = self._session.get(EmployeeRecord, registration_number)
        if record is None:
            return None
        return Employee(
            registration_number=record.registration_number,
            first_name=record.first_name,
            last_name=record.last_name,
            birth_date=record.birth_date,
            role=record.role,
            salary=record.salary,
            specialty=record.specialty,
        )

    def add(self, employee: Employee) -> None:
        self._session.add(
            EmployeeRecord(
                registration_number=employee.registration_number,
                first_name=employee.first_name,
                last_name=employee.last_name,
                birth_date=employee.birth_date,
                role=employee.role,
                salary=employee.salary,
                specialty=employee.specialty,
            )
        )
        self._session.flush()


class SqlAlchemyPaymentRepository(PaymentRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, payment_id: int) -> Payment | None:
        record = self._session.get(PaymentRecord, payment_id)
        if record is None:
            return None
        return self._to_entity(record)

    def add(self, payment: Payment) -> Payment:
        record = PaymentRecord(
            cash_desk_number=payment.cash_desk_number,
            employee_registration_number=payment.employee_registration_number,
            payment_type=payment.payment_type,
            created_at=payment.created_at,
            status=payment.status,
            confirmed_at=payment.confirmed_at,
        )
        self._session.add(record)
        self._session.flush()
        return self._to_entity(record)

    def save(self, payment: Payment) -> None:
        record = self._session.get(PaymentRecord, payment.id)
        if record is None:
            raise KeyError(f"Payment {payment.id} has not been added")
        record.payment_type = payment.payment_type
        record.status = payment.status
        record.confirmed_at = payment.confirmed_at
        self._session.flush()

    def remove(self, payment_id: int) -> None:
        self._session.execute(delete(PaymentRecord).where(PaymentRecord.id == payment_id))

    def list(
        self,
        cash_desk_number: int | None = None,
        date_from: date | None = None,
    ) -> list[Payment]:
        stmt = select(PaymentRecord).order_by(PaymentRecord.id)
        if cash_desk_number is not None:
            stmt = stmt.where(PaymentRecord.cash_desk_number == cash_desk_number)
        if date_from is not None:
            start_of_day = datetime.combine(date_from, time.min, tzinfo=UTC)
            stmt = stmt.where(PaymentRecord.created_at >= start_of_day)
        return [self._to_entity(record) for record in self._session.scalars(stmt)]

    @staticmethod
    def _to_entity(record: PaymentRecord) -> Payment:
        return Payment(
            id=record.id,
            cash_desk_number=record.cash_desk_number,
            employee_registration_number=record.employee_registration_number,
            payment_type=record.payment_type,
            created_at=_as_utc(record.created_at),
            status=record.status,
            confirmed_at=_as_utc(record.confirmed_at) if record.confirmed_at else None,
        )


class SqlAlchemyPaymentItemRepository(PaymentItemRepository):
    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, item: PaymentItem) -> PaymentItem:
        record = PaymentItemRecord(
            payment_id=item.payment_id,
            description=item.description,
            quantity=item.quantity,
            unit_price=item.unit_price,
        )
        self._session.add(record)
        self._session.flush()
        return self._to_entity(record)

    def list_by_payment(self, payment_id: int) -> list[PaymentItem]:
        stmt = (
            select(PaymentItemRecord)
            .where(PaymentItemRecord.payment_id == payment_id)
            .order_by(PaymentItemRecord.id)
        )
        return [self._to_entity(record) for record in self._session.scalars(stmt)]

    def remove_by_payment(self, payment_id: int) -> int:
        result = self._session.execute(
            delete(PaymentItemRecord).where(PaymentItemRecord.payment_id == payment_id)
        )
        return result.rowcount

    @staticmethod
    def _to_entity(record: PaymentItemRecord) -> PaymentItem:
        return PaymentItem(
            id=record.id,
            payment_id=record.payment_id,
            description=record.description,
            quantity=record.quantity,
            unit_price=record.unit_price,
        )
