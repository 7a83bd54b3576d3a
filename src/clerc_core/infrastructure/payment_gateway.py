from __future__ import annotations

from dataclasses import dataclass, field

from clerc_core.application.ports import (
    ChargeParams,
    GatewayCharge,
    OAuthCredentials,
    PaymentGateway,
)
from clerc_core.domain.exceptions import PaymentGatewayError


@dataclass(frozen=True, slots=True)
class RecordedCharge:
    params: ChargeParams
    connected_account: str


@dataclass
class RecordingPaymentGateway(PaymentGateway):
    """In-memory gateway for tests and local development.

    Answers with scripted results and records every call. Set
    ``charge_error`` or ``oauth_error`` to make the next calls fail.
    """

    charge_result: GatewayCharge = field(
        default_factory=lambda: GatewayCharge(id="ch_test", status="succeeded")
    )
    oauth_result: OAuthCredentials = field(
        default_factory=lambda: OAuthCredentials(
            publishable_key="pk_test",
            account_id="acct_test",
            refresh_token="rt_test",
            access_token="sk_test",
        )
    )
    charge_error: PaymentGatewayError | None = None
    oauth_error: PaymentGatewayError | None = None
    charges: list[RecordedCharge] = field(default_factory=list)
    oauth_codes: list[str] = field(default_factory=list)

    def create_charge(self, params: ChargeParams, connected_account: str) -> GatewayCharge:
        self.charges.append(RecordedCharge(params=params, connected_account=connected_account))
        if self.charge_error is not None:
            raise self.charge_error
        return self.charge_result

    def exchange_oauth_code(self, code: str, client_secret: str) -> OAuthCredentials:  # noqa: ARG002
        self.oauth_codes.append(code)
        if self.oauth_error is not None:
            raise self.oauth_error
        return self.oauth_result
