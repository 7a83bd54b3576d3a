"""
MongoDB Document Store
======================

Concrete DocumentStore backed by MongoDB.

Nested paths are flattened: the collection segments form the collection
name and the document ids form ``_id``, so
``("stores", "abc", "backend", "stripe")`` is the document ``"abc/stripe"``
in collection ``"stores.backend"``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from bson import ObjectId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from clerc_core.application.ports.document_store import (
    DocumentStore,
    WriteBatch,
    validate_collection_path,
    validate_document_path,
)
from clerc_core.domain.exceptions import DatastoreError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pymongo.client_session import ClientSession
    from pymongo.collection import Collection
    from pymongo.database import Database

    from clerc_core.application.ports.document_store import CollectionPath, DocumentPath

logger = logging.getLogger(__name__)

ID_FIELD = "_id"


def collection_name(path: DocumentPath) -> str:
    return ".".join(path[0::2])


def document_id(path: DocumentPath) -> str:
    return "/".join(path[1::2])


def connect(mongo_uri: str, database_name: str) -> MongoDocumentStore:
    """Open a client and return a store over the named database.

    The client is tz-aware so datetimes come back as UTC-aware values.
    """
    client: MongoClient = MongoClient(mongo_uri, tz_aware=True)
    logger.info("Connected to MongoDB database %s", database_name)
    return MongoDocumentStore(client[database_name], client=client)


class MongoDocumentStore(DocumentStore):
    """
    MongoDB implementation of DocumentStore.

    Batches run inside a multi-document transaction, which needs a replica
    set or sharded cluster; on a standalone server disable atomic store
    writes instead.
    """

    def __init__(self, database: Database, client: MongoClient | None = None) -> None:
        self._database = database
        self._client = client

    def _collection(self, path: DocumentPath) -> Collection:
        return self._database.get_collection(collection_name(path))

    def get(self, path: DocumentPath) -> dict[str, Any] | None:
        validate_document_path(path)
        try:
            doc = self._collection(path).find_one({ID_FIELD: document_id(path)})
        except PyMongoError as e:
            raise DatastoreError(f"Failed to read {'/'.join(path)}: {e}") from e
        if doc is None:
            return None
        doc.pop(ID_FIELD, None)
        return doc

    def exists(self, path: DocumentPath) -> bool:
        validate_document_path(path)
        try:
            count = self._collection(path).count_documents(
                {ID_FIELD: document_id(path)}, limit=1
            )
        except PyMongoError as e:
            raise DatastoreError(f"Failed to read {'/'.join(path)}: {e}") from e
        return count > 0

    def set(
        self,
        path: DocumentPath,
        data: Mapping[str, Any],
        session: ClientSession | None = None,
    ) -> None:
        validate_document_path(path)
        doc_id = document_id(path)
        try:
            self._collection(path).replace_one(
                {ID_FIELD: doc_id}, {**data, ID_FIELD: doc_id}, upsert=True, session=session
            )
        except PyMongoError as e:
            raise DatastoreError(f"Failed to write {'/'.join(path)}: {e}") from e

    def update(
        self,
        path: DocumentPath,
        fields: Mapping[str, Any],
        session: ClientSession | None = None,
    ) -> None:
        validate_document_path(path)
        try:
            result = self._collection(path).update_one(
                {ID_FIELD: document_id(path)}, {"$set": dict(fields)}, session=session
            )
        except PyMongoError as e:
            raise DatastoreError(f"Failed to update {'/'.join(path)}: {e}") from e
        if result.matched_count == 0:
            raise DatastoreError(f"Cannot update missing document {'/'.join(path)}")

    def allocate_id(self, collection: CollectionPath) -> str:
        validate_collection_path(collection)
        return str(ObjectId())

    def batch(self) -> MongoWriteBatch:
        if self._client is None:
            raise DatastoreError("Atomic batches need the MongoClient that owns the database")
        return MongoWriteBatch(self, self._client)


class MongoWriteBatch(WriteBatch):
    """Applies queued writes inside one MongoDB transaction."""

    def __init__(self, store: MongoDocumentStore, client: MongoClient) -> None:
        self._store = store
        self._client = client
        self._writes: list[tuple[str, DocumentPath, dict[str, Any]]] = []

    def set(self, path: DocumentPath, data: Mapping[str, Any]) -> None:
        validate_document_path(path)
        self._writes.append(("set", path, dict(data)))

    def update(self, path: DocumentPath, fields: Mapping[str, Any]) -> None:
        validate_document_path(path)
        self._writes.append(("update", path, dict(fields)))

    def commit(self) -> None:
        def apply(session: ClientSession) -> None:
            for op, path, data in self._writes:
                if op == "set":
                    self._store.set(path, data, session=session)
                else:
                    self._store.update(path, data, session=session)

        try:
            with self._client.start_session() as session:
                session.with_transaction(apply)
        except PyMongoError as e:
            raise DatastoreError(f"Batch transaction failed: {e}") from e
