from datetime import UTC, datetime, timedelta

from clerc_core.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Wall clock; the one PyJWT also checks ``exp`` against."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """A clock that only moves when told to.

    Lets tests issue tokens that are already expired (a time in the past)
    or pin the exact ``exp`` claim. Not thread-safe.
    """

    def __init__(self, fixed_time: datetime) -> None:
        self._fixed_time = _require_utc(fixed_time)

    def now(self) -> datetime:
        return self._fixed_time

    def set_time(self, new_time: datetime) -> None:
        self._fixed_time = _require_utc(new_time)

    def advance(self, delta: timedelta) -> None:
        self._fixed_time += delta


def _require_utc(value: datetime) -> datetime:
    if value.tzinfo is not UTC:
        raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={value.tzinfo}")
    return value
