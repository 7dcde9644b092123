"""SQLAlchemy ORM records for the cash desk payment tables."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from pos_payments.domain.entities import EmployeeRole, PaymentStatus, PaymentType


def _enum_column(enum_class: type) -> Enum:
    # Store enum values ("CreditCard"), not member names ("CREDIT_CARD").
    return Enum(
        enum_class,
        native_enum=False,
        length=20,
        values_callable=lambda members: [member.value for member in members],
    )


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class CashDeskRecord(Base):
    __tablename__ = "cash_desks"

    number: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    def __repr__(self) -> str:
        return f"<CashDeskRecord(number={self.number})>"


class EmployeeRecord(Base):
    """Employees of all roles in one table; role is the discriminator."""

    __tablename__ = "employees"

    registration_number: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    role: Mapped[EmployeeRole] = mapped_column(_enum_column(EmployeeRole), nullable=False)
    salary: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    specialty: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<EmployeeRecord(registration_number={self.registration_number}, "
            f"role={self.role.value})>"
        )


class PaymentRecord(Base):
    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    cash_desk_number: Mapped[int] = mapped_column(
        ForeignKey("cash_desks.number"), nullable=False, index=True
    )
    employee_registration_number: Mapped[int] = mapped_column(
        ForeignKey("employees.registration_number"), nullable=False
    )
    payment_type: Mapped[PaymentType] = mapped_column(_enum_column(PaymentType), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    status: Mapped[PaymentStatus] = mapped_column(_enum_column(PaymentStatus), nullable=False)
    confirmed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    items: Mapped[list[PaymentItemRecord]] = relationship(
        back_populates="payment", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<PaymentRecord(id={self.id}, status={self.status.value})>"


class PaymentItemRecord(Base):
    __tablename__ = "payment_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    payment_id: Mapped[int] = mapped_column(
        ForeignKey("payments.id", ondelete="CASCADE"), nullable=False, index=True
    )
    description: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    payment: Mapped[PaymentRecord] = relationship(back_populates="items")

    def __repr__(self) -> str:
        return f"<PaymentItemRecord(id={self.id}, payment_id={self.payment_id})>"
