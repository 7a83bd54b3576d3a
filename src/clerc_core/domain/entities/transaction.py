from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class Item:
    """A line item of a transaction. ``cost`` is in minor currency units."""

    name: str
    cost: int
    price_unit: Decimal
    quantity: int


@dataclass(frozen=True, slots=True)
class Transaction:
    """A completed purchase at a store.

    The id is the gateway's charge id. ``amount`` and ``taxes`` are in minor
    currency units; ``items`` keeps the order the datastore returned.
    """

    id: str
    amount: int
    taxes: int
    date: datetime
    store_id: str
    items: tuple[Item, ...]
