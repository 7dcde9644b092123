"""In-memory repositories for unit tests and local experiments.

Implementation notes:
- Dicts keyed by the natural or assigned id
- Ids are assigned from per-repository counters starting at 1
- Entities are frozen dataclasses, so they are stored and returned as-is
- NOT thread-safe
"""

from __future__ import annotations

from dataclasses import replace
from itertools import count
from typing import TYPE_CHECKING

from pos_payments.application.ports import (
    CashDeskRepository,
    EmployeeRepository,
    PaymentItemRepository,
    PaymentRepository,
)

if TYPE_CHECKING:
    from datetime import date

    from pos_payments.domain.entities import CashDesk, Employee, Payment, PaymentItem


class InMemoryCashDeskRepository(CashDeskRepository):
    def __init__(self) -> None:
        self._cash_desks: dict[int, CashDesk] = {}

    def get(self, number: int) -> CashDesk | None:
        return self._cash_desks.get(number)

    def add(self, cash_desk: CashDesk) -> None:
        self._cash_desks[cash_desk.number] = cash_desk


class InMemoryEmployeeRepository(EmployeeRepository):
    def __init__(self) -> None:
        self._employees: dict[int, Employee] = {}

    def get(self, registration_number: int) -> Employee | None:
        return self._employees.get(registration_number)

    def add(self, employee: Employee) -> None:
        self._employees[employee.registration_number] = employee


class InMemoryPaymentRepository(PaymentRepository):
    def __init__(self) -> None:
        self._payments: dict[int, Payment] = {}
        self._ids = count(1)

    def get(self, payment_id: int) -> Payment | None:
        return self._payments.get(payment_id)

    def add(self, payment: Payment) -> Payment:
        stored = replace(payment, id=next(self._ids))
        self._payments[stored.id] = stored
        return stored

    def save(self, payment: Payment) -> None:
        if payment.id not in self._payments:
            raise KeyError(f"Payment {payment.id} has not been added")
        self._payments[payment.id] = payment

    def remove(self, payment_id: int) -> None:
        self._payments.pop(payment_id, None)

    def list(
        self,
        cash_desk_number: int | None = None,
        date_from: date | None = None,
    ) -> list[Payment]:
        payments = sorted(self._payments.values(), key=lambda p: p.id)
        if cash_desk_number is not None:
            payments = [p for p in payments if p.cash_desk_number == cash_desk_number]
        if date_from is not None:
            payments = [p for p in payments if p.created_at.date() >= date_from]
        return payments


class InMemoryPaymentItemRepository(PaymentItemRepository):
    def __init__(self) -> None:
        self._items: dict[int, PaymentItem] = {}
        self._ids = count(1)

    def add(self, item: PaymentItem) -> PaymentItem:
        stored = replace(item, id=next(self._ids))
        self._items[stored.id] = stored
        return stored

    def list_by_payment(self, payment_id: int) -> list[PaymentItem]:
        return [item for _, item in sorted(self._items.items()) if item.payment_id == payment_id]

    def remove_by_payment(self, payment_id: int) -> int:
        doomed = [item_id for item_id, item in self._items.items() if item.payment_id == payment_id]
        for item_id in doomed:
            del self._items[item_id]
        return len(doomed)
