"""Domain exceptions for clerc-core.

Exception hierarchy:
    DomainException (base)
    ├── Client Errors
    │   ├── InvalidInputError
    │   │   └── InvalidAuthorizationCodeError
    │   └── UnauthorizedError
    ├── Not Found Errors
    │   └── NotFoundError
    │       ├── StoreNotFoundError
    │       └── VendorNotFoundError
    ├── Upstream Errors (never retried)
    │   └── UpstreamError
    │       ├── PaymentGatewayError
    │       ├── PaymentDeclinedError
    │       ├── DatastoreError
    │       └── PartialWriteError
    └── Outcome Errors
        └── PaymentPendingError

ConfigurationError is raised only while wiring the application and is not
a DomainException: it never crosses the request boundary.

Every DomainException carries an ErrorCategory. The entrypoint layer maps
categories to transport status codes; nothing below it knows about HTTP.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Status category a failure belongs to."""

    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"
    PENDING = "pending"


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from programming errors.
    """

    category: ErrorCategory = ErrorCategory.INVALID_INPUT

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__


class ConfigurationError(Exception):
    """Raised when settings or required secrets are missing or malformed."""


# =============================================================================
# Client Errors
# =============================================================================


class InvalidInputError(DomainException):
    """Raised when a required request field is missing, empty or malformed.

    Always raised before any external call is made.
    """

    category = ErrorCategory.INVALID_INPUT

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class InvalidAuthorizationCodeError(InvalidInputError):
    """Raised when the gateway refuses a vendor onboarding authorization code.

    The gateway may also refuse for transient reasons; the caller still
    receives a client error.
    """


class UnauthorizedError(DomainException):
    """Raised when the identity check fails or a session token is invalid.

    The message never describes why a token was rejected.
    """

    category = ErrorCategory.UNAUTHORIZED


# =============================================================================
# Not Found Errors
# =============================================================================


class NotFoundError(DomainException):
    """Raised when a referenced aggregate does not exist."""

    category = ErrorCategory.NOT_FOUND


class StoreNotFoundError(NotFoundError):
    """Raised when a store is missing or lacks its payment credentials."""


class VendorNotFoundError(NotFoundError):
    """Raised when a store is saved for a vendor that does not exist."""


# =============================================================================
# Upstream Errors
# =============================================================================


class UpstreamError(DomainException):
    """Raised when the payment gateway or the datastore fails."""

    category = ErrorCategory.UPSTREAM_ERROR


class PaymentGatewayError(UpstreamError):
    """Raised by gateway adapters with the gateway's human-readable message."""

    def __init__(self, message: str, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class PaymentDeclinedError(UpstreamError):
    """Raised when the gateway rejects a charge.

    Charges are never retried: a retry after an ambiguous failure risks
    charging the customer twice.
    """


class DatastoreError(UpstreamError):
    """Raised by datastore adapters when a read or write fails."""


class PartialWriteError(UpstreamError):
    """Raised when a multi-document write stops part way through.

    Only possible when atomic store writes are disabled. The documents
    written before the failure are left in place.
    """

    def __init__(self, message: str, store_id: str, completed_steps: tuple[str, ...]) -> None:
        super().__init__(message)
        self.store_id = store_id
        self.completed_steps = completed_steps


# =============================================================================
# Outcome Errors
# =============================================================================


class PaymentPendingError(DomainException):
    """Raised when the gateway accepts a charge without reporting success.

    The charge exists on the gateway; callers must not resubmit it.
    """

    category = ErrorCategory.PENDING

    def __init__(self, message: str, charge_id: str, status: str) -> None:
        super().__init__(message)
        self.charge_id = charge_id
        self.status = status
