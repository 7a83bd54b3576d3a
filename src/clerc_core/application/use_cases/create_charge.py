from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clerc_core.application.dtos import ChargeRequest, ChargeResponse
from clerc_core.application.ports import ChargeParams
from clerc_core.domain.exceptions import (
    InvalidInputError,
    PaymentDeclinedError,
    PaymentGatewayError,
    PaymentPendingError,
    StoreNotFoundError,
)

if TYPE_CHECKING:
    from clerc_core.application.ports import DomainRepository, PaymentGateway
    from clerc_core.domain.value_objects import FeeSchedule

logger = logging.getLogger(__name__)


class CreateChargeUseCase:
    """Charges a customer on a vendor's connected account.

    The platform keeps its fee through ``application_fee_amount`` on the
    same charge; the remainder settles directly on the vendor's account,
    so no transfer follows.

    Responsibilities:
    - Pick the fee: the store's schedule when a store is named, the
      platform's fixed fee otherwise
    - Create exactly one gateway charge (never retried)
    - Report any status other than "succeeded" as PaymentPendingError
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        repository: DomainRepository,
        currency: str,
        platform_fee: FeeSchedule,
    ) -> None:
        self._gateway = gateway
        self._repository = repository
        self._currency = currency
        self._platform_fee = platform_fee

    def execute(self, request: ChargeRequest) -> ChargeResponse:
        """Execute the charge.

        Args:
            request: A parsed charge request for an authenticated user.

        Returns:
            ChargeResponse with the gateway charge id.

        Raises:
            StoreNotFoundError: request.store_id names no complete store.
            InvalidInputError: The fee would exceed the charge amount, or
                request.store_id belongs to another connected account.
            PaymentDeclinedError: The gateway rejected the charge.
            PaymentPendingError: The charge exists but has not succeeded.
        """
        fee = self._fee_schedule(request).fee_for(request.amount)
        if fee > request.amount:
            raise InvalidInputError(
                f"Platform fee {fee} exceeds charge amount {request.amount}", ("amount",)
            )

        params = ChargeParams(
            amount=request.amount,
            currency=self._currency,
            customer=request.customer_id,
            source=request.payment_source,
            application_fee_amount=fee,
        )
        logger.info(
            "Creating charge of %d %s (fee %d) on %s for user %s",
            request.amount,
            self._currency,
            fee,
            request.connected_vendor_id,
            request.user_id,
        )

        try:
            charge = self._gateway.create_charge(params, request.connected_vendor_id)
        except PaymentGatewayError as e:
            logger.warning("Charge on %s declined: %s", request.connected_vendor_id, e.message)
            raise PaymentDeclinedError(e.message) from e

        if not charge.succeeded:
            logger.warning("Charge %s returned status %s", charge.id, charge.status)
            raise PaymentPendingError(
                f"Charge {charge.id} has status {charge.status}",
                charge_id=charge.id,
                status=charge.status,
            )

        logger.info("Charge %s succeeded", charge.id)
        return ChargeResponse(charge_id=charge.id, status=charge.status, application_fee_amount=fee)

    def _fee_schedule(self, request: ChargeRequest) -> FeeSchedule:
        if request.store_id is None:
            return self._platform_fee

        store = self._repository.get_store(request.store_id)
        if store is None:
            raise StoreNotFoundError(f"Store not found: {request.store_id}")
        # A store's schedule only applies to charges on its own account
        if store.stripe_user_id != request.connected_vendor_id:
            raise InvalidInputError(
                f"Store {request.store_id} does not belong to account "
                f"{request.connected_vendor_id}",
                ("store_id", "connected_vendor_id"),
            )
        return store.fee_schedule
