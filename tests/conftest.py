"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from clerc_core.domain.entities import Store, Vendor
from clerc_core.infrastructure.document_store import InMemoryDocumentStore
from clerc_core.infrastructure.domain_repository import DocumentDomainRepository
from clerc_core.infrastructure.payment_gateway import RecordingPaymentGateway
from clerc_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def system_time() -> SystemTimeProvider:
    return SystemTimeProvider()


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def repository(documents: InMemoryDocumentStore) -> DocumentDomainRepository:
    return DocumentDomainRepository(documents)


@pytest.fixture
def gateway() -> RecordingPaymentGateway:
    return RecordingPaymentGateway()


@pytest.fixture
def vendor() -> Vendor:
    return Vendor(
        name="Corner Grocer",
        stripe_publishable_key="pk_live_1",
        stripe_user_id="acct_1",
        stripe_refresh_token="rt_1",
        stripe_access_token="sk_live_1",
    )


@pytest.fixture
def store() -> Store:
    return Store(
        name="Corner Grocer - Main St",
        default_currency="usd",
        stripe_publishable_key="pk_live_1",
        stripe_user_id="acct_1",
        stripe_refresh_token="rt_1",
        stripe_access_token="sk_live_1",
        txn_fee_base=Decimal("30"),
        txn_fee_percent=Decimal("2.9"),
    )


@pytest.fixture
def signing_key() -> str:
    return "test-signing-key-0123456789-abcdefghijklmnop"
