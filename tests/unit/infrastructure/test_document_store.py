"""Tests for InMemoryDocumentStore.

Tests cover:
- DocumentStore interface: get/exists/set/update/add
- Nested collections addressed by path tuples
- Copy-on-read and copy-on-write
- Atomic batches
"""

import pytest

from clerc_core.application.ports import DocumentStore
from clerc_core.domain.exceptions import DatastoreError
from clerc_core.infrastructure.document_store import InMemoryDocumentStore


class TestInMemoryDocumentStoreBasics:
    def test_implements_document_store_interface(self, documents: InMemoryDocumentStore) -> None:
        assert isinstance(documents, DocumentStore)

    def test_get_returns_none_for_missing_document(self, documents: InMemoryDocumentStore) -> None:
        assert documents.get(("stores", "missing")) is None
        assert documents.exists(("stores", "missing")) is False

    def test_set_then_get(self, documents: InMemoryDocumentStore) -> None:
        documents.set(("stores", "s1"), {"name": "Main St"})

        assert documents.get(("stores", "s1")) == {"name": "Main St"}
        assert documents.exists(("stores", "s1")) is True

    def test_set_replaces_whole_document(self, documents: InMemoryDocumentStore) -> None:
        documents.set(("stores", "s1"), {"name": "a", "extra": 1})
        documents.set(("stores", "s1"), {"name": "b"})

        assert documents.get(("stores", "s1")) == {"name": "b"}

    def test_update_overwrites_only_given_fields(self, documents: InMemoryDocumentStore) -> None:
        documents.set(("vendors", "v1"), {"name": "Grocer", "stores": ["old"]})

        documents.update(("vendors", "v1"), {"stores": ["new"]})

        assert documents.get(("vendors", "v1")) == {"name": "Grocer", "stores": ["new"]}

    def test_update_missing_document_raises(self, documents: InMemoryDocumentStore) -> None:
        with pytest.raises(DatastoreError, match="missing document"):
            documents.update(("vendors", "ghost"), {"stores": []})

    def test_add_assigns_unique_ids(self, documents: InMemoryDocumentStore) -> None:
        first = documents.add(("vendors",), {"name": "a"})
        second = documents.add(("vendors",), {"name": "b"})

        assert first != second
        assert documents.get(("vendors", first)) == {"name": "a"}
        assert documents.collection_ids(("vendors",)) == [first, second]


class TestInMemoryDocumentStorePaths:
    def test_nested_document_independent_of_parent(self, documents: InMemoryDocumentStore) -> None:
        path = ("stores", "s1", "backend", "stripe")

        documents.set(path, {"stripe_user_id": "acct_1"})

        assert documents.get(path) == {"stripe_user_id": "acct_1"}
        assert documents.exists(("stores", "s1")) is False

    def test_collection_ids_exclude_nested_documents(
        self, documents: InMemoryDocumentStore
    ) -> None:
        documents.set(("stores", "s1"), {})
        documents.set(("stores", "s1", "backend", "stripe"), {})

        assert documents.collection_ids(("stores",)) == ["s1"]

    @pytest.mark.parametrize(
        "path",
        [(), ("stores",), ("stores", "s1", "backend"), ("stores", ""), ("stores", "a/b")],
    )
    def test_invalid_document_paths_rejected(
        self, documents: InMemoryDocumentStore, path: tuple[str, ...]
    ) -> None:
        with pytest.raises(ValueError):
            documents.get(path)

    def test_invalid_collection_path_rejected(self, documents: InMemoryDocumentStore) -> None:
        with pytest.raises(ValueError):
            documents.allocate_id(("stores", "s1"))


class TestInMemoryDocumentStoreCopies:
    def test_get_returns_copy(self, documents: InMemoryDocumentStore) -> None:
        documents.set(("vendors", "v1"), {"stores": ["s1"]})

        documents.get(("vendors", "v1"))["stores"].append("s2")  # type: ignore[index]

        assert documents.get(("vendors", "v1")) == {"stores": ["s1"]}

    def test_set_stores_copy(self, documents: InMemoryDocumentStore) -> None:
        data = {"stores": ["s1"]}
        documents.set(("vendors", "v1"), data)

        data["stores"].append("s2")

        assert documents.get(("vendors", "v1")) == {"stores": ["s1"]}


class TestInMemoryWriteBatch:
    def test_writes_invisible_until_commit(self, documents: InMemoryDocumentStore) -> None:
        batch = documents.batch()
        batch.set(("stores", "s1"), {"name": "a"})

        assert documents.exists(("stores", "s1")) is False

        batch.commit()

        assert documents.get(("stores", "s1")) == {"name": "a"}

    def test_failed_commit_writes_nothing(self, documents: InMemoryDocumentStore) -> None:
        batch = documents.batch()
        batch.set(("stores", "s1"), {"name": "a"})
        batch.update(("vendors", "ghost"), {"stores": ["s1"]})

        with pytest.raises(DatastoreError):
            batch.commit()

        assert documents.exists(("stores", "s1")) is False

    def test_update_of_document_set_in_same_batch(
        self, documents: InMemoryDocumentStore
    ) -> None:
        batch = documents.batch()
        batch.set(("vendors", "v1"), {"name": "a", "stores": []})
        batch.update(("vendors", "v1"), {"stores": ["s1"]})
        batch.commit()

        assert documents.get(("vendors", "v1")) == {"name": "a", "stores": ["s1"]}

    def test_commit_twice_raises(self, documents: InMemoryDocumentStore) -> None:
        batch = documents.batch()
        batch.commit()

        with pytest.raises(DatastoreError, match="already committed"):
            batch.commit()
