from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clerc_core.domain.value_objects import InvalidToken


class SessionTokenService(ABC):
    """Port for short-lived signed session tokens.

    Contract:
    - issue() does not check the user; the caller must have validated it
    - verify() fails closed: every failure yields the same InvalidToken
    - Tokens are stateless and cannot be revoked before they expire
    """

    @abstractmethod
    def issue(self, user_id: str, ttl_seconds: int | None = None) -> str:
        """Return a token for user_id that expires ttl_seconds from now."""

    @abstractmethod
    def verify(self, token: str) -> str | InvalidToken:
        """Return the token's user id, or INVALID_TOKEN."""
