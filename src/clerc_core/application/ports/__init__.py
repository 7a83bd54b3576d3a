"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from clerc_core.application.ports.document_store import DocumentStore, WriteBatch
from clerc_core.application.ports.domain_repository import DomainRepository
from clerc_core.application.ports.identity_validator import IdentityValidator
from clerc_core.application.ports.lock_provider import LockProvider
from clerc_core.application.ports.payment_gateway import (
    ChargeParams,
    GatewayCharge,
    OAuthCredentials,
    PaymentGateway,
)
from clerc_core.application.ports.secret_store import SecretStore
from clerc_core.application.ports.session_tokens import SessionTokenService
from clerc_core.application.ports.time_provider import TimeProvider

__all__ = [
    "ChargeParams",
    "DocumentStore",
    "DomainRepository",
    "GatewayCharge",
    "IdentityValidator",
    "LockProvider",
    "OAuthCredentials",
    "PaymentGateway",
    "SecretStore",
    "SessionTokenService",
    "TimeProvider",
    "WriteBatch",
]
