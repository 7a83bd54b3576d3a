"""Document-backed Domain Repository.

Document layout:
    stores/{store_id}                  name, default_currency, parent_vendor_id
    stores/{store_id}/backend/stripe   Stripe credentials and fee fields
    vendors/{vendor_id}                name, Stripe credentials, stores
    transactions/{charge_id}           amount, taxes, date, store_id, items

Decimals are stored as strings so no datastore rounds them.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from clerc_core.application.ports import DomainRepository
from clerc_core.domain.entities import Item, Store, Transaction, Vendor
from clerc_core.domain.exceptions import DatastoreError, PartialWriteError, VendorNotFoundError
from clerc_core.domain.value_objects import StoreListPolicy
from clerc_core.domain.value_objects.fee_schedule import to_decimal
from clerc_core.infrastructure.lock_provider import NoOpLockProvider, vendor_resource

if TYPE_CHECKING:
    from clerc_core.application.ports import DocumentStore, LockProvider
    from clerc_core.application.ports.document_store import DocumentPath

logger = logging.getLogger(__name__)

STORES_COL_NAME = "stores"
VENDORS_COL_NAME = "vendors"
CUSTOMERS_COL_NAME = "customers"
TXN_COL_NAME = "transactions"
VENDOR_STORES_PROP = "stores"
STORE_BACKEND_COL_NAME = "backend"
STORE_BACKEND_STRIPE_DOC_NAME = "stripe"

STEP_STORE = "store"
STEP_CREDENTIALS = "credentials"
STEP_VENDOR = "vendor"


def store_path(store_id: str) -> DocumentPath:
    return (STORES_COL_NAME, store_id)


def store_credentials_path(store_id: str) -> DocumentPath:
    return (STORES_COL_NAME, store_id, STORE_BACKEND_COL_NAME, STORE_BACKEND_STRIPE_DOC_NAME)


def vendor_path(vendor_id: str) -> DocumentPath:
    return (VENDORS_COL_NAME, vendor_id)


def transaction_path(txn_id: str) -> DocumentPath:
    return (TXN_COL_NAME, txn_id)


class DocumentDomainRepository(DomainRepository):
    """DomainRepository over a DocumentStore.

    Saving a store touches three documents: the store, its credentials and
    the owning vendor's store list. With ``atomic`` (the default) they are
    committed as one batch. Without it they are written in sequence and a
    failure part way raises PartialWriteError; documents already written
    stay, and a store without credentials reads as missing.

    ``store_list_policy`` decides whether the vendor's list is replaced
    (OVERWRITE, last writer wins) or extended (APPEND, serialized per
    vendor through ``lock_provider`` within this process).
    """

    def __init__(
        self,
        documents: DocumentStore,
        atomic: bool = True,
        store_list_policy: StoreListPolicy = StoreListPolicy.OVERWRITE,
        lock_provider: LockProvider | None = None,
    ) -> None:
        self._documents = documents
        self._atomic = atomic
        self._store_list_policy = store_list_policy
        self._lock_provider = lock_provider or NoOpLockProvider()

    # -------------------------------------------------------------------------
    # Stores
    # -------------------------------------------------------------------------

    def save_store(self, store: Store, vendor_id: str) -> str:
        logger.info("Saving store %s for vendor %s", store.name, vendor_id)
        with self._lock_provider.acquire(vendor_resource(vendor_id)):
            vendor_doc = self._documents.get(vendor_path(vendor_id))
            if vendor_doc is None:
                raise VendorNotFoundError(f"Vendor not found: {vendor_id}")

            store_id = self._documents.allocate_id((STORES_COL_NAME,))
            writes: list[tuple[str, str, DocumentPath, dict[str, Any]]] = [
                (STEP_STORE, "set", store_path(store_id), self._store_document(store, vendor_id)),
                (
                    STEP_CREDENTIALS,
                    "set",
                    store_credentials_path(store_id),
                    self._credentials_document(store),
                ),
                (
                    STEP_VENDOR,
                    "update",
                    vendor_path(vendor_id),
                    {VENDOR_STORES_PROP: self._store_list(vendor_doc, store_id)},
                ),
            ]

            if self._atomic:
                batch = self._documents.batch()
                for _, op, path, data in writes:
                    getattr(batch, op)(path, data)
                batch.commit()
            else:
                self._write_in_sequence(store_id, writes)

        logger.info("Saved store %s with id %s", store.name, store_id)
        return store_id

    def _write_in_sequence(
        self, store_id: str, writes: list[tuple[str, str, DocumentPath, dict[str, Any]]]
    ) -> None:
        completed: list[str] = []
        for step, op, path, data in writes:
            try:
                getattr(self._documents, op)(path, data)
            except DatastoreError as e:
                if not completed:
                    raise
                logger.error(
                    "Partial write of store %s: completed %s, failed at %s: %s",
                    store_id,
                    ", ".join(completed),
                    step,
                    e.message,
                )
                raise PartialWriteError(
                    f"Store {store_id} partially written; failed at {step}: {e.message}",
                    store_id=store_id,
                    completed_steps=tuple(completed),
                ) from e
            completed.append(step)

    def _store_list(self, vendor_doc: dict[str, Any], store_id: str) -> list[str]:
        if self._store_list_policy is StoreListPolicy.OVERWRITE:
            return [store_id]
        existing = [sid for sid in vendor_doc.get(VENDOR_STORES_PROP) or [] if sid != store_id]
        return [*existing, store_id]

    def get_store(self, store_id: str) -> Store | None:
        main_doc = self._documents.get(store_path(store_id))
        if main_doc is None:
            logger.info("Store with id %s does not exist", store_id)
            return None

        stripe_doc = self._documents.get(store_credentials_path(store_id))
        if stripe_doc is None:
            logger.warning("Store with id %s does not have Stripe info", store_id)
            return None

        return Store(
            id=store_id,
            name=main_doc["name"],
            default_currency=main_doc["default_currency"],
            stripe_publishable_key=stripe_doc["stripe_publishable_key"],
            stripe_user_id=stripe_doc["stripe_user_id"],
            stripe_refresh_token=stripe_doc["stripe_refresh_token"],
            stripe_access_token=stripe_doc["stripe_access_token"],
            txn_fee_base=to_decimal(stripe_doc["txn_fee_base"], "txn_fee_base"),
            txn_fee_percent=to_decimal(stripe_doc["txn_fee_percent"], "txn_fee_percent"),
        )

    @staticmethod
    def _store_document(store: Store, vendor_id: str) -> dict[str, Any]:
        return {
            "name": store.name,
            "default_currency": store.default_currency,
            "parent_vendor_id": vendor_id,
        }

    @staticmethod
    def _credentials_document(store: Store) -> dict[str, Any]:
        return {
            "stripe_publishable_key": store.stripe_publishable_key,
            "stripe_user_id": store.stripe_user_id,
            "stripe_refresh_token": store.stripe_refresh_token,
            "stripe_access_token": store.stripe_access_token,
            "txn_fee_base": str(store.txn_fee_base),
            "txn_fee_percent": str(store.txn_fee_percent),
        }

    # -------------------------------------------------------------------------
    # Transactions
    # -------------------------------------------------------------------------

    def get_transaction(self, txn_id: str) -> Transaction | None:
        txn_doc = self._documents.get(transaction_path(txn_id))
        if txn_doc is None:
            logger.info("Transaction with id %s was not found", txn_id)
            return None

        items = tuple(
            Item(
                name=item["name"],
                cost=item["cost"],
                price_unit=to_decimal(item["price_unit"], "price_unit"),
                quantity=item["quantity"],
            )
            for item in txn_doc.get("items") or []
        )
        return Transaction(
            id=txn_id,
            amount=txn_doc["amount"],
            taxes=txn_doc["taxes"],
            date=txn_doc["date"],
            store_id=txn_doc["store_id"],
            items=items,
        )

    # -------------------------------------------------------------------------
    # Vendors
    # -------------------------------------------------------------------------

    def save_vendor(self, vendor: Vendor) -> str:
        vendor_id = self._documents.add(
            (VENDORS_COL_NAME,),
            {
                "name": vendor.name,
                "stripe_publishable_key": vendor.stripe_publishable_key,
                "stripe_user_id": vendor.stripe_user_id,
                "stripe_refresh_token": vendor.stripe_refresh_token,
                "stripe_access_token": vendor.stripe_access_token,
                VENDOR_STORES_PROP: list(vendor.store_ids),
            },
        )
        logger.info("Saved vendor %s with id %s", vendor.name, vendor_id)
        return vendor_id

    def get_vendor(self, vendor_id: str) -> Vendor | None:
        doc = self._documents.get(vendor_path(vendor_id))
        if doc is None:
            return None
        return Vendor(
            id=vendor_id,
            name=doc["name"],
            stripe_publishable_key=doc["stripe_publishable_key"],
            stripe_user_id=doc["stripe_user_id"],
            stripe_refresh_token=doc["stripe_refresh_token"],
            stripe_access_token=doc["stripe_access_token"],
            store_ids=tuple(doc.get(VENDOR_STORES_PROP) or ()),
        )
