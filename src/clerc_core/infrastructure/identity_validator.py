from __future__ import annotations

from typing import TYPE_CHECKING

from clerc_core.application.ports import IdentityValidator
from clerc_core.infrastructure.domain_repository import CUSTOMERS_COL_NAME, VENDORS_COL_NAME

if TYPE_CHECKING:
    from clerc_core.application.ports import DocumentStore


class DocumentIdentityValidator(IdentityValidator):
    """Looks a user id up among customers, then vendors.

    Customers call the API far more often, so they are checked first. Both
    collections share one id namespace by convention.
    """

    def __init__(self, documents: DocumentStore) -> None:
        self._documents = documents

    def is_valid_user(self, user_id: str) -> bool:
        if not user_id or not user_id.strip() or "/" in user_id:
            return False
        if self._documents.exists((CUSTOMERS_COL_NAME, user_id)):
            return True
        return self._documents.exists((VENDORS_COL_NAME, user_id))
