"""Fixtures backed by an in-memory SQLite database."""

from collections.abc import Iterator
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from pos_payments.application.services import PaymentService
from pos_payments.config import Settings
from pos_payments.domain.entities import CashDesk, Employee
from pos_payments.entrypoints.api import create_app
from pos_payments.infrastructure.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from pos_payments.infrastructure.sqlalchemy_repositories import (
    SqlAlchemyCashDeskRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyPaymentItemRepository,
    SqlAlchemyPaymentRepository,
)
from pos_payments.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, app_env="test", database_url="sqlite://")


@pytest.fixture
def engine(settings: Settings) -> Iterator[Engine]:
    engine = create_db_engine(settings)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(
    engine: Engine, cash_desk: CashDesk, cashier: Employee, manager: Employee
) -> Iterator[Session]:
    """A session on a database holding cash desk 1, the cashier and the manager."""
    with create_session_factory(engine)() as session:
        SqlAlchemyCashDeskRepository(session).add(cash_desk)
        employees = SqlAlchemyEmployeeRepository(session)
        employees.add(cashier)
        employees.add(manager)
        session.commit()
        yield session


@pytest.fixture
def db_service(session: Session, time_provider: FixedTimeProvider) -> PaymentService:
    return PaymentService(
        time_provider=time_provider,
        cash_desk_repository=SqlAlchemyCashDeskRepository(session),
        employee_repository=SqlAlchemyEmployeeRepository(session),
        payment_repository=SqlAlchemyPaymentRepository(session),
        payment_item_repository=SqlAlchemyPaymentItemRepository(session),
    )


# =============================================================================
# HTTP client
# =============================================================================


@pytest.fixture
def client(
    settings: Settings,
    now: datetime,
    cash_desk: CashDesk,
    cashier: Employee,
    manager: Employee,
) -> Iterator[TestClient]:
    app = create_app(settings, time_provider=FixedTimeProvider(now))
    with TestClient(app) as client:
        with app.state.session_factory() as seed:
            SqlAlchemyCashDeskRepository(seed).add(cash_desk)
            employees = SqlAlchemyEmployeeRepository(seed)
            employees.add(cashier)
            employees.add(manager)
            seed.commit()
        yield client
