"""Shared pytest fixtures for the test suite."""

from datetime import UTC, date, datetime

import pytest

from pos_payments.application.services import PaymentService
from pos_payments.domain.entities import CashDesk, Employee, EmployeeRole
from pos_payments.infrastructure.in_memory import (
    InMemoryCashDeskRepository,
    InMemoryEmployeeRepository,
    InMemoryPaymentItemRepository,
    InMemoryPaymentRepository,
)
from pos_payments.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def now() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 5, 13, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(now: datetime) -> FixedTimeProvider:
    return FixedTimeProvider(now)


@pytest.fixture
def cash_desk() -> CashDesk:
    return CashDesk(number=1)


@pytest.fixture
def cashier() -> Employee:
    return Employee(
        registration_number=1,
        first_name="John",
        last_name="Doe",
        birth_date=date(1990, 1, 1),
        role=EmployeeRole.CASHIER,
        specialty="Food",
    )


@pytest.fixture
def manager() -> Employee:
    return Employee(
        registration_number=2,
        first_name="Jane",
        last_name="Doe",
        birth_date=date(1980, 1, 1),
        role=EmployeeRole.MANAGER,
        specialty="SUV",
    )


# =============================================================================
# In-memory wiring
# =============================================================================


@pytest.fixture
def cash_desk_repository(cash_desk: CashDesk) -> InMemoryCashDeskRepository:
    repository = InMemoryCashDeskRepository()
    repository.add(cash_desk)
    return repository


@pytest.fixture
def employee_repository(cashier: Employee, manager: Employee) -> InMemoryEmployeeRepository:
    repository = InMemoryEmployeeRepository()
    repository.add(cashier)
    repository.add(manager)
    return repository


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def payment_item_repository() -> InMemoryPaymentItemRepository:
    return InMemoryPaymentItemRepository()


@pytest.fixture
def service(
    time_provider: FixedTimeProvider,
    cash_desk_repository: InMemoryCashDeskRepository,
    employee_repository: InMemoryEmployeeRepository,
    payment_repository: InMemoryPaymentRepository,
    payment_item_repository: InMemoryPaymentItemRepository,
) -> PaymentService:
    return PaymentService(
        time_provider=time_provider,
        cash_desk_repository=cash_desk_repository,
        employee_repository=employee_repository,
        payment_repository=payment_repository,
        payment_item_repository=payment_item_repository,
    )
