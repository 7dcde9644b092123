"""Request-scoped dependencies: one session and one service per request."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from pos_payments.application.services import PaymentService
from pos_payments.infrastructure.sqlalchemy_repositories import (
    SqlAlchemyCashDeskRepository,
    SqlAlchemyEmployeeRepository,
    SqlAlchemyPaymentItemRepository,
    SqlAlchemyPaymentRepository,
)


def get_session(request: Request) -> Iterator[Session]:
    """Yield a session; commit when the route returns, roll back when it raises."""
    session_factory = request.app.state.session_factory
    with session_factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


SessionDep = Annotated[Session, Depends(get_session)]


def get_payment_service(request: Request, session: SessionDep) -> PaymentService:
    return PaymentService(
        time_provider=request.app.state.time_provider,
        cash_desk_repository=SqlAlchemyCashDeskRepository(session),
        employee_repository=SqlAlchemyEmployeeRepository(session),
        payment_repository=SqlAlchemyPaymentRepository(session),
        payment_item_repository=SqlAlchemyPaymentItemRepository(session),
    )


PaymentServiceDep = Annotated[PaymentService, Depends(get_payment_service)]
