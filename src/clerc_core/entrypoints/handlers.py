"""Framework-neutral request handlers.

Each handler takes an already-parsed JSON body (and, where required, the
raw Authorization value) and returns a HandlerResult. A web framework only
has to route requests here and copy the status and body back out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Any

from clerc_core.application.dtos import (
    ChargeRequest,
    IssueSessionTokenRequest,
    OnboardVendorRequest,
)
from clerc_core.domain.exceptions import DomainException, ErrorCategory, PaymentPendingError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from clerc_core.application.use_cases import (
        AuthenticateSessionUseCase,
        CreateChargeUseCase,
        IssueSessionTokenUseCase,
        OnboardVendorUseCase,
    )

logger = logging.getLogger(__name__)

STATUS_BY_CATEGORY: dict[ErrorCategory, HTTPStatus] = {
    ErrorCategory.INVALID_INPUT: HTTPStatus.BAD_REQUEST,
    ErrorCategory.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorCategory.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCategory.UPSTREAM_ERROR: HTTPStatus.BAD_GATEWAY,
    ErrorCategory.PENDING: HTTPStatus.ACCEPTED,
}


@dataclass(frozen=True, slots=True)
class HandlerResult:
    status_code: int
    body: dict[str, Any]

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class RequestHandlers:
    """Request surface for the session, charge and onboarding operations."""

    def __init__(
        self,
        issue_session_token: IssueSessionTokenUseCase,
        authenticate_session: AuthenticateSessionUseCase,
        create_charge: CreateChargeUseCase,
        onboard_vendor: OnboardVendorUseCase,
    ) -> None:
        self._issue_session_token = issue_session_token
        self._authenticate_session = authenticate_session
        self._create_charge = create_charge
        self._onboard_vendor = onboard_vendor

    def health(self) -> HandlerResult:
        return HandlerResult(HTTPStatus.OK, {"status": "ok"})

    def refresh_token(self, body: Mapping[str, Any]) -> HandlerResult:
        """Issue a session token to a known customer or vendor. No token needed."""

        def run() -> dict[str, Any]:
            request = IssueSessionTokenRequest.from_payload(body)
            return self._issue_session_token.execute(request).to_dict()

        return _handle(run)

    def charge(self, body: Mapping[str, Any], authorization: str | None) -> HandlerResult:
        """Charge a customer on a vendor's connected account."""

        def run() -> dict[str, Any]:
            user_id = self._authenticate_session.execute(authorization)
            request = ChargeRequest.from_payload(user_id, body)
            return self._create_charge.execute(request).to_dict()

        return _handle(run)

    def connect_standard_account(
        self, body: Mapping[str, Any], authorization: str | None
    ) -> HandlerResult:
        """Onboard a vendor from a gateway authorization code."""

        def run() -> dict[str, Any]:
            self._authenticate_session.execute(authorization)
            request = OnboardVendorRequest.from_payload(body)
            return self._onboard_vendor.execute(request).to_dict()

        return _handle(run)


def _handle(run: Callable[[], dict[str, Any]]) -> HandlerResult:
    try:
        return HandlerResult(HTTPStatus.OK, run())
    except DomainException as e:
        return _error_result(e)


def _error_result(error: DomainException) -> HandlerResult:
    status = STATUS_BY_CATEGORY[error.category]
    if isinstance(error, PaymentPendingError):
        return HandlerResult(
            status, {"charge_id": error.charge_id, "status": error.status, "error": error.message}
        )
    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error("Upstream failure: %s", error.message)
    return HandlerResult(status, {"error": error.message})
