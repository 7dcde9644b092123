from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos_payments.domain.entities import CashDesk, Employee


class CashDeskRepository(ABC):
    """Port for cash desk lookup."""

    @abstractmethod
    def get(self, number: int) -> CashDesk | None:
        """Retrieve a cash desk by number, None if it does not exist."""

    @abstractmethod
    def add(self, cash_desk: CashDesk) -> None:
        """Persist a new cash desk."""


class EmployeeRepository(ABC):
    """Port for employee lookup."""

    @abstractmethod
    def get(self, registration_number: int) -> Employee | None:
        """Retrieve an employee by registration number, None if it does not exist."""

    @abstractmethod
    def add(self, employee: Employee) -> None:
        """Persist a new employee."""
