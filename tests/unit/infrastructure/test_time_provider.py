"""Tests for the TimeProvider implementations used to stamp payments."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from pos_payments.application.ports import TimeProvider
from pos_payments.infrastructure.time_provider import (
    FixedTimeProvider,
    SystemTimeProvider,
)

CET = timezone(timedelta(hours=1))


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_is_current_utc_time(self) -> None:
        provider = SystemTimeProvider()
        before = datetime.now(UTC)

        result = provider.now()

        assert result.tzinfo is UTC
        assert before <= result <= datetime.now(UTC)


class TestFixedTimeProvider:
    def test_now_returns_fixed_time(self, now: datetime) -> None:
        provider = FixedTimeProvider(now)

        assert provider.now() == now
        assert provider.now() == now

    def test_set_time_moves_the_clock(self, now: datetime) -> None:
        provider = FixedTimeProvider(now)
        next_day = now + timedelta(days=1)

        provider.set_time(next_day)

        assert provider.now() == next_day

    def test_set_time_can_move_backwards(self, now: datetime) -> None:
        provider = FixedTimeProvider(now)

        provider.set_time(now - timedelta(hours=2))

        assert provider.now() < now


class TestFixedTimeProviderUtcValidation:
    """Timestamps stored on payments are always UTC."""

    @pytest.mark.parametrize(
        "value",
        [datetime(2024, 5, 13, 12, 0), datetime(2024, 5, 13, 12, 0, tzinfo=CET)],
        ids=["naive", "cet"],
    )
    def test_creation_rejects_non_utc(self, value: datetime) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(value)

    @pytest.mark.parametrize(
        "value",
        [datetime(2024, 5, 13, 12, 0), datetime(2024, 5, 13, 12, 0, tzinfo=CET)],
        ids=["naive", "cet"],
    )
    def test_set_time_rejects_non_utc(self, now: datetime, value: datetime) -> None:
        provider = FixedTimeProvider(now)

        with pytest.raises(ValueError, match="tzinfo=UTC"):
            provider.set_time(value)

        assert provider.now() == now
