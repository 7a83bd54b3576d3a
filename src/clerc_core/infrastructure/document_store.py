from __future__ import annotations

import copy
from threading import RLock
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from clerc_core.application.ports.document_store import (
    DocumentStore,
    WriteBatch,
    validate_collection_path,
    validate_document_path,
)
from clerc_core.domain.exceptions import DatastoreError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from clerc_core.application.ports.document_store import CollectionPath, DocumentPath


class InMemoryDocumentStore(DocumentStore):
    """In-memory document store for tests and local development.

    Implementation notes:
    - Documents are keyed by their full path tuple; nested collections need
      no parent document, as in hierarchical document databases
    - Deep copies on read and write mimic detachment from the database
    - A re-entrant lock makes single operations and batch commits atomic
    """

    def __init__(self) -> None:
        self._documents: dict[DocumentPath, dict[str, Any]] = {}
        self._lock = RLock()

    def get(self, path: DocumentPath) -> dict[str, Any] | None:
        validate_document_path(path)
        with self._lock:
            document = self._documents.get(path)
            return None if document is None else copy.deepcopy(document)

    def exists(self, path: DocumentPath) -> bool:
        validate_document_path(path)
        with self._lock:
            return path in self._documents

    def set(self, path: DocumentPath, data: Mapping[str, Any]) -> None:
        validate_document_path(path)
        with self._lock:
            self._documents[path] = copy.deepcopy(dict(data))

    def update(self, path: DocumentPath, fields: Mapping[str, Any]) -> None:
        validate_document_path(path)
        with self._lock:
            document = self._documents.get(path)
            if document is None:
                raise DatastoreError(f"Cannot update missing document {'/'.join(path)}")
            document.update(copy.deepcopy(dict(fields)))

    def allocate_id(self, collection: CollectionPath) -> str:
        validate_collection_path(collection)
        return uuid4().hex

    def batch(self) -> InMemoryWriteBatch:
        return InMemoryWriteBatch(self)

    def collection_ids(self, collection: CollectionPath) -> list[str]:
        """Ids of the documents directly inside a collection, in insertion order."""
        validate_collection_path(collection)
        depth = len(collection)
        with self._lock:
            return [
                path[depth]
                for path in self._documents
                if len(path) == depth + 1 and path[:depth] == collection
            ]

    def _apply(self, writes: list[tuple[str, DocumentPath, dict[str, Any]]]) -> None:
        with self._lock:
            created: set[DocumentPath] = set()
            for op, path, _ in writes:
                if op == "set":
                    created.add(path)
                elif path not in self._documents and path not in created:
                    raise DatastoreError(
                        f"Batch aborted, cannot update missing document {'/'.join(path)}"
                    )
            for op, path, data in writes:
                if op == "set":
                    self._documents[path] = copy.deepcopy(data)
                else:
                    self._documents[path].update(copy.deepcopy(data))


class InMemoryWriteBatch(WriteBatch):
    """Queues writes and applies them under the store's lock on commit()."""

    def __init__(self, store: InMemoryDocumentStore) -> None:
        self._store = store
        self._writes: list[tuple[str, DocumentPath, dict[str, Any]]] = []
        self._committed = False

    def set(self, path: DocumentPath, data: Mapping[str, Any]) -> None:
        validate_document_path(path)
        self._writes.append(("set", path, copy.deepcopy(dict(data))))

    def update(self, path: DocumentPath, fields: Mapping[str, Any]) -> None:
        validate_document_path(path)
        self._writes.append(("update", path, copy.deepcopy(dict(fields))))

    def commit(self) -> None:
        if self._committed:
            raise DatastoreError("Batch already committed")
        self._store._apply(self._writes)
        self._committed = True
