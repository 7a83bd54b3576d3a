from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True, slots=True)
class Vendor:
    """A merchant with a connected account on the payment gateway.

    ``stripe_user_id`` is the connected account id that charges are routed
    to. ``store_ids`` lists the stores this vendor owns, in the order the
    datastore holds them.
    """

    name: str
    stripe_publishable_key: str
    stripe_user_id: str
    stripe_refresh_token: str
    stripe_access_token: str
    store_ids: tuple[str, ...] = field(default_factory=tuple)
    id: str | None = None

    def with_id(self, vendor_id: str) -> Vendor:
        return replace(self, id=vendor_id)
