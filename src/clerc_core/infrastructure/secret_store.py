from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clerc_core.application.ports import SecretStore

if TYPE_CHECKING:
    from clerc_core.application.ports import DocumentStore
    from clerc_core.domain.value_objects import SecretName

logger = logging.getLogger(__name__)

SECRETS_COL_NAME = "secrets"
SECRET_VALUE_FIELD = "key"


class DocumentSecretStore(SecretStore):
    """Reads secrets from ``secrets/{name}``, field ``key``."""

    def __init__(self, documents: DocumentStore) -> None:
        self._documents = documents

    def get_secret(self, name: SecretName) -> str | None:
        doc = self._documents.get((SECRETS_COL_NAME, str(name)))
        if doc is None or doc.get(SECRET_VALUE_FIELD) is None:
            logger.warning("Could not find secret %s - document does not exist", name)
            return None
        return str(doc[SECRET_VALUE_FIELD])
