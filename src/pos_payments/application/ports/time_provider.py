from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for the clock used to stamp payments.

    Contract:
    - now() returns a datetime with tzinfo=datetime.UTC, never a naive one
    - created_at and confirmed_at of a payment both come from this port,
      so date filters and confirmation times share one time zone
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current UTC datetime (tzinfo=datetime.UTC)."""
