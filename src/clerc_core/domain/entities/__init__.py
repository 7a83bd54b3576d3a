"""Domain entities - Aggregates persisted as documents."""

from clerc_core.domain.entities.store import Store
from clerc_core.domain.entities.transaction import Item, Transaction
from clerc_core.domain.entities.vendor import Vendor

__all__ = [
    "Item",
    "Store",
    "Transaction",
    "Vendor",
]
