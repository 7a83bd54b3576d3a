from __future__ import annotations

from typing import TYPE_CHECKING

from clerc_core.domain.exceptions import UnauthorizedError
from clerc_core.domain.value_objects import InvalidToken

if TYPE_CHECKING:
    from clerc_core.application.ports import SessionTokenService

BEARER_PREFIX = "bearer "


class AuthenticateSessionUseCase:
    """Resolves a bearer credential to the user id it was issued for.

    Accepts either a raw token or an Authorization-style "Bearer <token>"
    value. Every rejection raises the same UnauthorizedError.
    """

    def __init__(self, token_service: SessionTokenService) -> None:
        self._token_service = token_service

    def execute(self, credential: str | None) -> str:
        token = _strip_scheme(credential)
        if not token:
            raise UnauthorizedError("Access Denied - Invalid Token")

        result = self._token_service.verify(token)
        if isinstance(result, InvalidToken):
            raise UnauthorizedError("Access Denied - Invalid Token")
        return result


def _strip_scheme(credential: str | None) -> str:
    if not credential:
        return ""
    credential = credential.strip()
    if credential.lower().startswith(BEARER_PREFIX):
        return credential[len(BEARER_PREFIX):].strip()
    return credential
