from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for the clock used to stamp session token expiry.

    Implementations return aware datetimes in UTC. A naive value would
    shift every token's lifetime by the host's UTC offset.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current instant, with tzinfo=datetime.UTC."""
        ...

    def expiry(self, ttl_seconds: int) -> datetime:
        """The instant ``ttl_seconds`` from now."""
        return self.now() + timedelta(seconds=ttl_seconds)
