from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clerc_core.domain.entities import Store, Transaction, Vendor


class DomainRepository(ABC):
    """Port for Store, Vendor and Transaction persistence.

    Contract:
    - get_*() returns None if the aggregate does not exist (no exception)
    - A Store exists only if both its main document and its payment
      credentials exist; half-written stores read as None
    - save_store() records the new store on the owning vendor
    - Identifiers are assigned by the datastore, never by the caller
    """

    @abstractmethod
    def save_store(self, store: Store, vendor_id: str) -> str:
        """Persist a new store for the vendor and return its id.

        Raises:
            VendorNotFoundError: The vendor does not exist; nothing was written.
            PartialWriteError: Non-atomic mode only; some writes landed.
            DatastoreError: The datastore failed.
        """

    @abstractmethod
    def get_store(self, store_id: str) -> Store | None:
        """Load a store with its payment credentials."""

    @abstractmethod
    def get_transaction(self, txn_id: str) -> Transaction | None:
        """Load a transaction with its items in stored order."""

    @abstractmethod
    def save_vendor(self, vendor: Vendor) -> str:
        """Insert a new vendor and return the datastore-assigned id."""

    @abstractmethod
    def get_vendor(self, vendor_id: str) -> Vendor | None:
        """Load a vendor."""
