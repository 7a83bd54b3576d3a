"""Application wiring.

Builds every component once, at process start, from Settings and the
secrets stored in the datastore. Components receive their collaborators
through constructors; nothing is looked up from module globals later.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from clerc_core.application.use_cases import (
    AuthenticateSessionUseCase,
    CreateChargeUseCase,
    IssueSessionTokenUseCase,
    OnboardVendorUseCase,
)
from clerc_core.config import RuntimeSecrets, Settings
from clerc_core.domain.exceptions import ConfigurationError
from clerc_core.domain.value_objects import SecretName, StoreListPolicy
from clerc_core.entrypoints.handlers import RequestHandlers
from clerc_core.infrastructure.domain_repository import DocumentDomainRepository
from clerc_core.infrastructure.identity_validator import DocumentIdentityValidator
from clerc_core.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from clerc_core.infrastructure.secret_store import DocumentSecretStore
from clerc_core.infrastructure.session_tokens import JwtSessionTokenService
from clerc_core.infrastructure.stripe_gateway import StripeGateway
from clerc_core.infrastructure.time_provider import SystemTimeProvider
from clerc_core.logging_config import configure_logging

if TYPE_CHECKING:
    from clerc_core.application.ports import (
        DocumentStore,
        PaymentGateway,
        SecretStore,
        TimeProvider,
    )

logger = logging.getLogger(__name__)


def load_secrets(secret_store: SecretStore) -> RuntimeSecrets:
    """Read each secret once.

    Raises:
        ConfigurationError: The signing key or the Stripe secret is missing.
    """
    signing_key = secret_store.get_secret(SecretName.JWT_KEY)
    stripe_api_secret = secret_store.get_secret(SecretName.STRIPE_API_SECRET)
    mailgun_key = secret_store.get_secret(SecretName.MAILGUN)

    missing = [
        str(name)
        for name, value in (
            (SecretName.JWT_KEY, signing_key),
            (SecretName.STRIPE_API_SECRET, stripe_api_secret),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(f"Required secrets missing: {', '.join(missing)}")

    logger.info("Loaded secrets from the datastore")
    return RuntimeSecrets(
        signing_key=signing_key,
        stripe_api_secret=stripe_api_secret,
        mailgun_key=mailgun_key,
    )


def build_handlers(
    settings: Settings,
    document_store: DocumentStore | None = None,
    gateway: PaymentGateway | None = None,
    time_provider: TimeProvider | None = None,
) -> RequestHandlers:
    """Wire the application.

    Args:
        settings: Process settings.
        document_store: Datastore to use; MongoDB from settings if omitted.
        gateway: Payment gateway; Stripe with the stored secret if omitted.
        time_provider: Clock for token issuance; system clock if omitted.
    """
    if document_store is None:
        from clerc_core.infrastructure.mongo_document_store import connect

        document_store = connect(settings.mongo_uri, settings.mongo_database_name)

    secrets = load_secrets(DocumentSecretStore(document_store))

    if gateway is None:
        gateway = StripeGateway(
            api_secret=secrets.stripe_api_secret,
            api_base=settings.stripe_api_base,
            connect_base=settings.stripe_connect_base,
            timeout=settings.gateway_timeout_seconds,
        )

    lock_provider = (
        InMemoryLockProvider()
        if settings.store_list_policy is StoreListPolicy.APPEND
        else NoOpLockProvider()
    )
    repository = DocumentDomainRepository(
        document_store,
        atomic=settings.atomic_store_writes,
        store_list_policy=settings.store_list_policy,
        lock_provider=lock_provider,
    )
    token_service = JwtSessionTokenService(
        signing_key=secrets.signing_key,
        time_provider=time_provider or SystemTimeProvider(),
        algorithm=settings.jwt_algorithm,
        default_ttl_seconds=settings.session_ttl_seconds,
    )

    return RequestHandlers(
        issue_session_token=IssueSessionTokenUseCase(
            identity_validator=DocumentIdentityValidator(document_store),
            token_service=token_service,
            ttl_seconds=settings.session_ttl_seconds,
        ),
        authenticate_session=AuthenticateSessionUseCase(token_service),
        create_charge=CreateChargeUseCase(
            gateway=gateway,
            repository=repository,
            currency=settings.default_currency,
            platform_fee=settings.platform_fee,
        ),
        onboard_vendor=OnboardVendorUseCase(
            gateway=gateway,
            repository=repository,
            client_secret=secrets.stripe_api_secret,
            default_currency=settings.default_currency,
            store_fee=settings.platform_fee,
        ),
    )


def create_app_handlers() -> RequestHandlers:
    """Entry point for hosting processes: env settings, logging, MongoDB, Stripe."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    return build_handlers(settings)
