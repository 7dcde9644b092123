from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date
    from decimal import Decimal


class EmployeeRole(Enum):
    """Role of an employee; determines which payments they may create."""

    CASHIER = "Cashier"
    MANAGER = "Manager"


@dataclass(frozen=True, slots=True)
class Employee:
    """Staff member working at the cash desks.

    specialty holds the role-specific free text: the job specialisation
    of a cashier (e.g. "Food") or the car type of a manager (e.g. "SUV").
    """

    registration_number: int
    first_name: str
    last_name: str
    birth_date: date
    role: EmployeeRole
    salary: Decimal | None = None
    specialty: str | None = None

    @property
    def can_create_credit_card_payments(self) -> bool:
        return self.role == EmployeeRole.MANAGER
