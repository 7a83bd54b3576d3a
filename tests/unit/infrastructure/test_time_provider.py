"""Tests for TimeProvider implementations.

Tests cover:
- SystemTimeProvider returns the current UTC datetime
- FixedTimeProvider returns, moves and advances a fixed time
- expiry() offsets the current time by a ttl
- UTC validation rejects naive and non-UTC datetimes
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from clerc_core.application.ports import TimeProvider
from clerc_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider


class TestSystemTimeProvider:
    def test_implements_time_provider_interface(self) -> None:
        assert isinstance(SystemTimeProvider(), TimeProvider)

    def test_now_returns_current_utc_time(self) -> None:
        provider = SystemTimeProvider()
        before = datetime.now(UTC)

        result = provider.now()

        after = datetime.now(UTC)
        assert result.tzinfo is UTC
        assert before <= result <= after


class TestFixedTimeProvider:
    def test_implements_time_provider_interface(self, fixed_time: datetime) -> None:
        assert isinstance(FixedTimeProvider(fixed_time), TimeProvider)

    def test_now_returns_fixed_time(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        assert provider.now() == provider.now() == fixed_time

    def test_set_time_changes_returned_time(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)
        earlier = fixed_time - timedelta(hours=2)

        provider.set_time(earlier)

        assert provider.now() == earlier

    def test_advance_moves_time_forward(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        provider.advance(timedelta(seconds=61))

        assert provider.now() == fixed_time + timedelta(seconds=61)


class TestFixedTimeProviderUtcValidation:
    """A naive or offset datetime would skew every token expiry."""

    def test_creation_raises_for_naive_datetime(self) -> None:
        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 1, 1, 12, 0, 0))

    def test_creation_raises_for_non_utc_timezone(self) -> None:
        offset = timezone(timedelta(hours=6))

        with pytest.raises(ValueError, match="tzinfo=UTC"):
            FixedTimeProvider(datetime(2024, 1, 1, 12, 0, 0, tzinfo=offset))

    def test_set_time_raises_for_naive_datetime(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        with pytest.raises(ValueError, match="tzinfo=UTC"):
            provider.set_time(datetime(2024, 1, 1, 13, 0, 0))


class TestExpiry:
    def test_expiry_is_now_plus_ttl(self, fixed_time: datetime) -> None:
        provider = FixedTimeProvider(fixed_time)

        assert provider.expiry(60) == fixed_time + timedelta(seconds=60)
