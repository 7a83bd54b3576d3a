"""Tests for application wiring."""

from unittest.mock import patch

import pytest

from clerc_core.config import Settings
from clerc_core.domain.exceptions import ConfigurationError
from clerc_core.domain.value_objects import StoreListPolicy
from clerc_core.entrypoints.bootstrap import build_handlers, load_secrets
from clerc_core.entrypoints.handlers import RequestHandlers
from clerc_core.infrastructure.document_store import InMemoryDocumentStore
from clerc_core.infrastructure.payment_gateway import RecordingPaymentGateway
from clerc_core.infrastructure.secret_store import DocumentSecretStore


@pytest.fixture
def seeded(documents: InMemoryDocumentStore, signing_key: str) -> InMemoryDocumentStore:
    documents.set(("secrets", "JWT_KEY"), {"key": signing_key})
    documents.set(("secrets", "STRIPE_API_SECRET"), {"key": "sk_platform"})
    return documents


class TestLoadSecrets:
    def test_loads_required_and_optional_secrets(
        self, seeded: InMemoryDocumentStore, signing_key: str
    ) -> None:
        seeded.set(("secrets", "MAILGUN"), {"key": "mg_key"})

        secrets = load_secrets(DocumentSecretStore(seeded))

        assert secrets.signing_key == signing_key
        assert secrets.stripe_api_secret == "sk_platform"
        assert secrets.mailgun_key == "mg_key"

    def test_mailgun_is_optional(self, seeded: InMemoryDocumentStore) -> None:
        assert load_secrets(DocumentSecretStore(seeded)).mailgun_key is None

    def test_missing_required_secrets_fail_startup(
        self, documents: InMemoryDocumentStore
    ) -> None:
        with pytest.raises(ConfigurationError, match="JWT_KEY, STRIPE_API_SECRET"):
            load_secrets(DocumentSecretStore(documents))

    def test_repr_hides_secret_values(self, seeded: InMemoryDocumentStore, signing_key: str) -> None:
        secrets = load_secrets(DocumentSecretStore(seeded))

        assert signing_key not in repr(secrets)


class TestBuildHandlers:
    def test_builds_with_injected_adapters(self, seeded: InMemoryDocumentStore) -> None:
        handlers = build_handlers(
            Settings(), document_store=seeded, gateway=RecordingPaymentGateway()
        )

        assert isinstance(handlers, RequestHandlers)

    def test_missing_secrets_fail_before_handlers_exist(
        self, documents: InMemoryDocumentStore
    ) -> None:
        with pytest.raises(ConfigurationError):
            build_handlers(Settings(), document_store=documents, gateway=RecordingPaymentGateway())

    def test_stripe_gateway_built_from_stored_secret(self, seeded: InMemoryDocumentStore) -> None:
        settings = Settings(stripe_api_base="https://api.stripe.test", gateway_timeout_seconds=5.0)

        with patch("clerc_core.entrypoints.bootstrap.StripeGateway") as stripe_cls:
            build_handlers(settings, document_store=seeded)

        stripe_cls.assert_called_once_with(
            api_secret="sk_platform",
            api_base="https://api.stripe.test",
            connect_base="https://connect.stripe.com",
            timeout=5.0,
        )

    def test_mongo_used_when_no_store_given(self, seeded: InMemoryDocumentStore) -> None:
        settings = Settings(mongo_uri="mongodb://db.test:27017", mongo_database_name="clerc")

        with patch(
            "clerc_core.infrastructure.mongo_document_store.connect", return_value=seeded
        ) as connect:
            build_handlers(settings, gateway=RecordingPaymentGateway())

        connect.assert_called_once_with("mongodb://db.test:27017", "clerc")

    def test_append_policy_wires_vendor_lock(self, seeded: InMemoryDocumentStore) -> None:
        settings = Settings(store_list_policy=StoreListPolicy.APPEND)

        with patch("clerc_core.entrypoints.bootstrap.InMemoryLockProvider") as lock_cls:
            build_handlers(settings, document_store=seeded, gateway=RecordingPaymentGateway())

        lock_cls.assert_called_once_with()

    def test_overwrite_policy_needs_no_lock(self, seeded: InMemoryDocumentStore) -> None:
        with patch("clerc_core.entrypoints.bootstrap.InMemoryLockProvider") as lock_cls:
            build_handlers(Settings(), document_store=seeded, gateway=RecordingPaymentGateway())

        lock_cls.assert_not_called()
