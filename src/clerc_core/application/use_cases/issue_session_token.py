from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clerc_core.application.dtos import IssueSessionTokenRequest, SessionTokenResponse
from clerc_core.domain.exceptions import UnauthorizedError

if TYPE_CHECKING:
    from clerc_core.application.ports import IdentityValidator, SessionTokenService

logger = logging.getLogger(__name__)


class IssueSessionTokenUseCase:
    """Issues a session token to a known customer or vendor.

    This is the only operation reachable without a token. The identity
    check happens here, not in the token service.
    """

    def __init__(
        self,
        identity_validator: IdentityValidator,
        token_service: SessionTokenService,
        ttl_seconds: int,
    ) -> None:
        self._identity_validator = identity_validator
        self._token_service = token_service
        self._ttl_seconds = ttl_seconds

    def execute(self, request: IssueSessionTokenRequest) -> SessionTokenResponse:
        """Issue a token for request.user_id.

        Raises:
            UnauthorizedError: The user id names neither a customer nor a vendor.
        """
        if not self._identity_validator.is_valid_user(request.user_id):
            logger.info("Refused session token for unknown user %s", request.user_id)
            raise UnauthorizedError("Access Denied - Invalid User ID")

        token = self._token_service.issue(request.user_id, self._ttl_seconds)
        logger.info("Issued session token for user %s", request.user_id)
        return SessionTokenResponse(token=token, expires_in=self._ttl_seconds)
