"""Stripe adapter for the PaymentGateway port, over Stripe's REST API.

Charges are created directly on the vendor's connected account (the
``Stripe-Account`` header) with ``application_fee_amount`` as the
platform's cut. Vendor onboarding uses Stripe Connect's OAuth token
endpoint.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from clerc_core.application.ports import GatewayCharge, OAuthCredentials, PaymentGateway
from clerc_core.domain.exceptions import PaymentGatewayError

if TYPE_CHECKING:
    from clerc_core.application.ports import ChargeParams

logger = logging.getLogger(__name__)

CHARGES_PATH = "/v1/charges"
OAUTH_TOKEN_PATH = "/oauth/token"


class StripeGateway(PaymentGateway):
    """PaymentGateway backed by Stripe.

    No retries: a timed-out charge may still have been created, and
    resubmitting it could charge the customer twice.
    """

    def __init__(
        self,
        api_secret: str,
        api_base: str = "https://api.stripe.com",
        connect_base: str = "https://connect.stripe.com",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self._api_secret = api_secret
        self._api_base = api_base.rstrip("/")
        self._connect_base = connect_base.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def create_charge(self, params: ChargeParams, connected_account: str) -> GatewayCharge:
        data = {
            "amount": params.amount,
            "currency": params.currency,
            "customer": params.customer,
            "source": params.source,
            "application_fee_amount": params.application_fee_amount,
        }
        body = self._post(
            f"{self._api_base}{CHARGES_PATH}",
            data=data,
            auth=(self._api_secret, ""),
            headers={"Stripe-Account": connected_account},
        )
        try:
            return GatewayCharge(id=body["id"], status=body["status"])
        except KeyError as e:
            raise PaymentGatewayError(f"Malformed charge response: missing {e}") from e

    def exchange_oauth_code(self, code: str, client_secret: str) -> OAuthCredentials:
        body = self._post(
            f"{self._connect_base}{OAUTH_TOKEN_PATH}",
            data={
                "client_secret": client_secret,
                "code": code,
                "grant_type": "authorization_code",
            },
        )
        try:
            return OAuthCredentials(
                publishable_key=body["stripe_publishable_key"],
                account_id=body["stripe_user_id"],
                refresh_token=body["refresh_token"],
                access_token=body["access_token"],
            )
        except KeyError as e:
            raise PaymentGatewayError(f"Malformed OAuth response: missing {e}") from e

    def _post(self, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            resp = self._session.post(url, timeout=self._timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("Stripe request to %s failed: %s", url, e)
            raise PaymentGatewayError(f"Payment gateway unreachable: {e}") from e

        body = _json_or_empty(resp)
        if resp.status_code != 200:
            message = _error_message(body) or f"HTTP {resp.status_code}"
            logger.warning("Stripe returned %d for %s: %s", resp.status_code, url, message)
            raise PaymentGatewayError(message, http_status=resp.status_code)
        return body


def _json_or_empty(resp: requests.Response) -> dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_message(body: dict[str, Any]) -> str | None:
    # API errors nest under "error"; OAuth errors put a code in "error"
    # and the text in "error_description".
    error = body.get("error")
    if isinstance(error, dict):
        return error.get("message") or error.get("code")
    return body.get("error_description") or error
