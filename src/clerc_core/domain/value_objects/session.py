from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InvalidToken:
    """Outcome of verifying a token that must be denied.

    Decode errors, signature mismatches and expiry all produce the same
    value. Callers treat it as "deny" and never learn the cause.
    """

    def __bool__(self) -> bool:
        return False


INVALID_TOKEN = InvalidToken()
