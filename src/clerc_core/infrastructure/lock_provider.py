from __future__ import annotations

from collections import defaultdict
from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from clerc_core.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator


def vendor_resource(vendor_id: str) -> str:
    """Lock name guarding a vendor's store list."""
    return f"vendor:{vendor_id}"


class InMemoryLockProvider(LockProvider):
    """One lock per vendor, shared by every thread of this process.

    Used by the append store-list policy. Separate worker processes each
    have their own table and still race on the datastore. Locks are never
    evicted; there is one per vendor that ever saved a store.
    """

    def __init__(self) -> None:
        self._table_lock = Lock()
        self._locks: defaultdict[str, Lock] = defaultdict(Lock)

    def lock_for(self, resource_id: str) -> Lock:
        with self._table_lock:
            return self._locks[resource_id]

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        with self.lock_for(resource_id):
            yield


class NoOpLockProvider(LockProvider):
    """Used with the overwrite store-list policy, where the last writer wins."""

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
