from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

CHARGE_SUCCEEDED = "succeeded"


@dataclass(frozen=True, slots=True)
class ChargeParams:
    """Parameters of a charge created on a vendor's connected account.

    ``application_fee_amount`` is the platform's cut; the rest settles on
    the connected account without a separate transfer.
    """

    amount: int
    currency: str
    customer: str
    source: str
    application_fee_amount: int


@dataclass(frozen=True, slots=True)
class GatewayCharge:
    id: str
    status: str

    @property
    def succeeded(self) -> bool:
        return self.status == CHARGE_SUCCEEDED


@dataclass(frozen=True, slots=True)
class OAuthCredentials:
    """Credentials returned when a vendor authorizes the platform.

    ``account_id`` is the vendor's connected account id.
    """

    publishable_key: str
    account_id: str
    refresh_token: str
    access_token: str


class PaymentGateway(ABC):
    """Port for the payment gateway.

    Contract:
    - Every failure raises PaymentGatewayError carrying the gateway's
      human-readable message (and HTTP status when there was a response)
    - Implementations never retry; a retried charge can double-charge
    """

    @abstractmethod
    def create_charge(self, params: ChargeParams, connected_account: str) -> GatewayCharge:
        """Create a charge on the connected account, retaining the fee.

        Raises:
            PaymentGatewayError: The gateway rejected or failed the charge.
        """

    @abstractmethod
    def exchange_oauth_code(self, code: str, client_secret: str) -> OAuthCredentials:
        """Exchange a vendor's authorization code for account credentials.

        Raises:
            PaymentGatewayError: The gateway answered with a non-success status.
        """
