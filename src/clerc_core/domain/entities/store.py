"""Store aggregate: a vendor's point of sale and its payment credentials."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal

from clerc_core.domain.value_objects.fee_schedule import FeeSchedule, to_decimal


@dataclass(frozen=True, slots=True)
class Store:
    """A store owned by exactly one vendor.

    ``id`` is None until the store has been persisted. The Stripe fields are
    the connected-account credentials obtained when the vendor onboarded;
    ``txn_fee_base`` (minor units) and ``txn_fee_percent`` describe the
    platform fee for charges made at this store.
    """

    name: str
    default_currency: str
    stripe_publishable_key: str
    stripe_user_id: str
    stripe_refresh_token: str
    stripe_access_token: str
    txn_fee_base: Decimal
    txn_fee_percent: Decimal
    id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "txn_fee_base", to_decimal(self.txn_fee_base, "txn_fee_base"))
        object.__setattr__(
            self, "txn_fee_percent", to_decimal(self.txn_fee_percent, "txn_fee_percent")
        )

    @property
    def fee_schedule(self) -> FeeSchedule:
        return FeeSchedule(base_cents=self.txn_fee_base, percent=self.txn_fee_percent)

    def with_id(self, store_id: str) -> Store:
        return replace(self, id=store_id)
