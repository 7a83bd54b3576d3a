from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import jwt

from clerc_core.application.ports import SessionTokenService
from clerc_core.domain.value_objects import INVALID_TOKEN, InvalidToken

if TYPE_CHECKING:
    from clerc_core.application.ports import TimeProvider

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60
USER_ID_CLAIM = "user_id"


class JwtSessionTokenService(SessionTokenService):
    """Session tokens as signed JWTs carrying ``{user_id, exp}``.

    Expiry is stamped from the injected clock and checked by PyJWT against
    the system clock at verification time.
    """

    def __init__(
        self,
        signing_key: str,
        time_provider: TimeProvider,
        algorithm: str = "HS256",
        default_ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        if not signing_key:
            raise ValueError("signing_key cannot be empty")
        self._signing_key = signing_key
        self._time_provider = time_provider
        self._algorithm = algorithm
        self._default_ttl_seconds = default_ttl_seconds

    def issue(self, user_id: str, ttl_seconds: int | None = None) -> str:
        ttl = self._default_ttl_seconds if ttl_seconds is None else ttl_seconds
        expires_at = self._time_provider.expiry(ttl)
        payload = {USER_ID_CLAIM: user_id, "exp": int(expires_at.timestamp())}
        return jwt.encode(payload, self._signing_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str | InvalidToken:
        try:
            claims = jwt.decode(
                token,
                self._signing_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", USER_ID_CLAIM]},
            )
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected session token: %s", type(e).__name__)
            return INVALID_TOKEN

        user_id = claims.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            logger.debug("Rejected session token: malformed user_id claim")
            return INVALID_TOKEN
        return user_id
