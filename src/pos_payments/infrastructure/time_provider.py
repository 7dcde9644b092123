"""Clocks behind the TimeProvider port.

PaymentService reads the clock once per command: `created_at` when a payment
is opened and `confirmed_at` when it is confirmed. Both are stored as UTC.
"""

from datetime import UTC, datetime

from pos_payments.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Wall clock used by the API (`create_app` default)."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Clock frozen at a given UTC instant.

    Lets tests assert exact `created_at` / `confirmed_at` values and move
    between days to exercise the `dateFrom` filter.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._validate_utc(fixed_time)
        self._fixed_time = fixed_time

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        """Explicitly change the fixed time, e.g. to confirm a payment a day later."""
        self._validate_utc(new_time)
        self._fixed_time = new_time

    def _validate_utc(self, dt: datetime) -> None:
        if dt.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={dt.tzinfo}")
