"""Tests for StripeGateway.

Tests cover:
- Charge requests go to the connected account with the platform fee
- OAuth code exchange maps Stripe's response onto OAuthCredentials
- Non-200 responses and transport failures raise PaymentGatewayError
- No call is ever retried
"""

from unittest.mock import MagicMock

import pytest
import requests

from clerc_core.application.ports import ChargeParams, GatewayCharge, OAuthCredentials
from clerc_core.domain.exceptions import PaymentGatewayError
from clerc_core.infrastructure.stripe_gateway import StripeGateway


def _response(status_code: int, body: object) -> MagicMock:
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def stripe(session: MagicMock) -> StripeGateway:
    return StripeGateway(
        "sk_platform",
        api_base="https://api.stripe.test/",
        connect_base="https://connect.stripe.test",
        timeout=5.0,
        session=session,
    )


@pytest.fixture
def params() -> ChargeParams:
    return ChargeParams(
        amount=1000,
        currency="usd",
        customer="cus_1",
        source="src_1",
        application_fee_amount=50,
    )


# =============================================================================
# Charge Tests
# =============================================================================


class TestCreateCharge:
    def test_posts_charge_to_connected_account(
        self, stripe: StripeGateway, session: MagicMock, params: ChargeParams
    ) -> None:
        session.post.return_value = _response(200, {"id": "ch_1", "status": "succeeded"})

        result = stripe.create_charge(params, "acct_1")

        assert result == GatewayCharge(id="ch_1", status="succeeded")
        session.post.assert_called_once_with(
            "https://api.stripe.test/v1/charges",
            timeout=5.0,
            data={
                "amount": 1000,
                "currency": "usd",
                "customer": "cus_1",
                "source": "src_1",
                "application_fee_amount": 50,
            },
            auth=("sk_platform", ""),
            headers={"Stripe-Account": "acct_1"},
        )

    def test_pending_status_is_returned_not_raised(
        self, stripe: StripeGateway, session: MagicMock, params: ChargeParams
    ) -> None:
        session.post.return_value = _response(200, {"id": "ch_2", "status": "pending"})

        result = stripe.create_charge(params, "acct_1")

        assert result.succeeded is False

    def test_card_error_message_is_surfaced(
        self, stripe: StripeGateway, session: MagicMock, params: ChargeParams
    ) -> None:
        session.post.return_value = _response(
            402, {"error": {"type": "card_error", "message": "Your card was declined."}}
        )

        with pytest.raises(PaymentGatewayError, match="Your card was declined.") as exc_info:
            stripe.create_charge(params, "acct_1")

        assert exc_info.value.http_status == 402

    def test_non_json_error_uses_status(
        self, stripe: StripeGateway, session: MagicMock, params: ChargeParams
    ) -> None:
        session.post.return_value = _response(503, ValueError("not json"))

        with pytest.raises(PaymentGatewayError, match="HTTP 503"):
            stripe.create_charge(params, "acct_1")

    def test_timeout_is_not_retried(
        self, stripe: StripeGateway, session: MagicMock, params: ChargeParams
    ) -> None:
        session.post.side_effect = requests.Timeout("read timed out")

        with pytest.raises(PaymentGatewayError, match="unreachable") as exc_info:
            stripe.create_charge(params, "acct_1")

        assert exc_info.value.http_status is None
        assert session.post.call_count == 1

    def test_malformed_success_response(
        self, stripe: StripeGateway, session: MagicMock, params: ChargeParams
    ) -> None:
        session.post.return_value = _response(200, {"object": "charge"})

        with pytest.raises(PaymentGatewayError, match="Malformed charge response"):
            stripe.create_charge(params, "acct_1")


# =============================================================================
# OAuth Tests
# =============================================================================


class TestExchangeOAuthCode:
    def test_exchanges_code_for_credentials(
        self, stripe: StripeGateway, session: MagicMock
    ) -> None:
        session.post.return_value = _response(
            200,
            {
                "stripe_publishable_key": "pk_live_1",
                "stripe_user_id": "acct_1",
                "refresh_token": "rt_1",
                "access_token": "sk_live_1",
                "token_type": "bearer",
            },
        )

        result = stripe.exchange_oauth_code("ac_123", "sk_platform")

        assert result == OAuthCredentials(
            publishable_key="pk_live_1",
            account_id="acct_1",
            refresh_token="rt_1",
            access_token="sk_live_1",
        )
        session.post.assert_called_once_with(
            "https://connect.stripe.test/oauth/token",
            timeout=5.0,
            data={
                "client_secret": "sk_platform",
                "code": "ac_123",
                "grant_type": "authorization_code",
            },
        )

    def test_invalid_grant_uses_error_description(
        self, stripe: StripeGateway, session: MagicMock
    ) -> None:
        session.post.return_value = _response(
            400,
            {
                "error": "invalid_grant",
                "error_description": "Authorization code does not exist: ac_123",
            },
        )

        with pytest.raises(PaymentGatewayError, match="Authorization code does not exist") as exc_info:
            stripe.exchange_oauth_code("ac_123", "sk_platform")

        assert exc_info.value.http_status == 400

    def test_error_code_without_description(
        self, stripe: StripeGateway, session: MagicMock
    ) -> None:
        session.post.return_value = _response(401, {"error": "invalid_client"})

        with pytest.raises(PaymentGatewayError, match="invalid_client"):
            stripe.exchange_oauth_code("ac_123", "sk_platform")
