from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

# ("stores", "<id>") names a document; ("stores", "<id>", "backend") names a
# nested collection; ("stores", "<id>", "backend", "stripe") a nested document.
DocumentPath = tuple[str, ...]
CollectionPath = tuple[str, ...]


def validate_document_path(path: DocumentPath) -> None:
    if not path or len(path) % 2 != 0:
        raise ValueError(f"Document path must have an even number of segments: {path!r}")
    _validate_segments(path)


def validate_collection_path(path: CollectionPath) -> None:
    if not path or len(path) % 2 != 1:
        raise ValueError(f"Collection path must have an odd number of segments: {path!r}")
    _validate_segments(path)


def _validate_segments(path: tuple[str, ...]) -> None:
    for segment in path:
        if not isinstance(segment, str) or not segment or "/" in segment:
            raise ValueError(f"Invalid path segment {segment!r} in {path!r}")


class WriteBatch(ABC):
    """A group of writes applied together by commit().

    Writes queued on a batch are not visible until commit() returns.
    Implementations apply all of them or none of them.
    """

    @abstractmethod
    def set(self, path: DocumentPath, data: Mapping[str, Any]) -> None:
        """Queue a create-or-replace of the document at path."""

    @abstractmethod
    def update(self, path: DocumentPath, fields: Mapping[str, Any]) -> None:
        """Queue a field update; commit() fails if the document does not exist."""

    @abstractmethod
    def commit(self) -> None:
        """Apply every queued write.

        Raises:
            DatastoreError: Nothing was written.
        """


class DocumentStore(ABC):
    """Port for a document-oriented datastore with nested collections.

    Contract:
    - get() returns None if the document does not exist (no exception)
    - Returned mappings are copies; mutating them does not change stored state
    - update() on a missing document raises DatastoreError
    - Any backend failure surfaces as DatastoreError; nothing is retried
    - Implementations are safe to share between concurrent requests
    """

    @abstractmethod
    def get(self, path: DocumentPath) -> dict[str, Any] | None:
        """Return the document's fields, or None if it does not exist."""

    @abstractmethod
    def exists(self, path: DocumentPath) -> bool:
        """Check whether a document exists without loading it."""

    @abstractmethod
    def set(self, path: DocumentPath, data: Mapping[str, Any]) -> None:
        """Create the document, or replace it entirely if it exists."""

    @abstractmethod
    def update(self, path: DocumentPath, fields: Mapping[str, Any]) -> None:
        """Overwrite the given top-level fields of an existing document."""

    @abstractmethod
    def allocate_id(self, collection: CollectionPath) -> str:
        """Return a fresh document id for the collection without writing."""

    @abstractmethod
    def batch(self) -> WriteBatch:
        """Start a batch of writes that commit atomically."""

    def add(self, collection: CollectionPath, data: Mapping[str, Any]) -> str:
        """Insert a new document under a datastore-assigned id and return the id."""
        document_id = self.allocate_id(collection)
        self.set((*collection, document_id), data)
        return document_id
