from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clerc_core.application.dtos import OnboardVendorRequest, OnboardVendorResponse
from clerc_core.domain.entities import Store, Vendor
from clerc_core.domain.exceptions import (
    DomainException,
    InvalidAuthorizationCodeError,
    PaymentGatewayError,
)

if TYPE_CHECKING:
    from clerc_core.application.ports import DomainRepository, OAuthCredentials, PaymentGateway
    from clerc_core.domain.value_objects import FeeSchedule

logger = logging.getLogger(__name__)


class OnboardVendorUseCase:
    """Connects a vendor's gateway account to the platform.

    Steps:
    1. Exchange the authorization code for the vendor's credentials
    2. Persist the vendor
    3. Optionally create the vendor's store with the same credentials

    A refused exchange is reported as a client error and writes nothing.
    Steps 2 and 3 are separate writes: a failed store save leaves the
    vendor in place and logs its id.
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        repository: DomainRepository,
        client_secret: str,
        default_currency: str,
        store_fee: FeeSchedule,
    ) -> None:
        self._gateway = gateway
        self._repository = repository
        self._client_secret = client_secret
        self._default_currency = default_currency
        self._store_fee = store_fee

    def execute(self, request: OnboardVendorRequest) -> OnboardVendorResponse:
        """Execute vendor onboarding.

        Raises:
            InvalidAuthorizationCodeError: The gateway refused the code.
            PaymentGatewayError: The gateway could not be reached.
            DatastoreError: Persisting the vendor or store failed. When only
                the store fails the vendor stays saved; a retry creates a
                second vendor.
        """
        try:
            credentials = self._gateway.exchange_oauth_code(
                request.account_auth_code, self._client_secret
            )
        except PaymentGatewayError as e:
            if e.http_status is None:
                logger.error(
                    "Gateway unreachable while onboarding vendor %s: %s",
                    request.vendor_name,
                    e.message,
                )
                raise
            logger.warning(
                "Authorization code exchange failed for vendor %s (status %s): %s",
                request.vendor_name,
                e.http_status,
                e.message,
            )
            raise InvalidAuthorizationCodeError(
                f"Could not connect account: {e.message}", ("account_auth_code",)
            ) from e

        vendor_id = self._repository.save_vendor(self._vendor(request.vendor_name, credentials))
        logger.info("Onboarded vendor %s with id %s", request.vendor_name, vendor_id)

        if request.store_name is None:
            return OnboardVendorResponse(vendor_id=vendor_id)

        store = Store(
            name=request.store_name,
            default_currency=request.default_currency or self._default_currency,
            stripe_publishable_key=credentials.publishable_key,
            stripe_user_id=credentials.account_id,
            stripe_refresh_token=credentials.refresh_token,
            stripe_access_token=credentials.access_token,
            txn_fee_base=self._store_fee.base_cents,
            txn_fee_percent=self._store_fee.percent,
        )
        try:
            store_id = self._repository.save_store(store, vendor_id)
        except DomainException as e:
            logger.error(
                "Vendor %s was saved but its store %s was not: %s",
                vendor_id,
                request.store_name,
                e.message,
            )
            raise
        return OnboardVendorResponse(vendor_id=vendor_id, store_id=store_id)

    @staticmethod
    def _vendor(name: str, credentials: OAuthCredentials) -> Vendor:
        return Vendor(
            name=name,
            stripe_publishable_key=credentials.publishable_key,
            stripe_user_id=credentials.account_id,
            stripe_refresh_token=credentials.refresh_token,
            stripe_access_token=credentials.access_token,
        )
