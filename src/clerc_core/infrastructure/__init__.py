"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Datastore: in-memory and MongoDB document stores, the domain repository,
  secret and identity lookups built on them
- Payment gateway: the Stripe adapter and a recording in-memory gateway
- Session tokens: PyJWT-signed tokens
- Time and locking: clock and per-resource lock providers

Infrastructure adapters implement the ports defined in the application layer.
"""

from clerc_core.infrastructure.document_store import InMemoryDocumentStore
from clerc_core.infrastructure.domain_repository import DocumentDomainRepository
from clerc_core.infrastructure.identity_validator import DocumentIdentityValidator
from clerc_core.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from clerc_core.infrastructure.payment_gateway import RecordingPaymentGateway
from clerc_core.infrastructure.secret_store import DocumentSecretStore
from clerc_core.infrastructure.session_tokens import JwtSessionTokenService
from clerc_core.infrastructure.stripe_gateway import StripeGateway
from clerc_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "DocumentDomainRepository",
    "DocumentIdentityValidator",
    "DocumentSecretStore",
    "FixedTimeProvider",
    "InMemoryDocumentStore",
    "InMemoryLockProvider",
    "JwtSessionTokenService",
    "NoOpLockProvider",
    "RecordingPaymentGateway",
    "StripeGateway",
    "SystemTimeProvider",
]
