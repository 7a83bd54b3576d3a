"""Tests for the error taxonomy and its categories."""

import pytest

from clerc_core.domain.exceptions import (
    DatastoreError,
    DomainException,
    ErrorCategory,
    InvalidAuthorizationCodeError,
    InvalidInputError,
    NotFoundError,
    PartialWriteError,
    PaymentDeclinedError,
    PaymentGatewayError,
    PaymentPendingError,
    StoreNotFoundError,
    UnauthorizedError,
    UpstreamError,
    VendorNotFoundError,
)


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (InvalidInputError("x"), ErrorCategory.INVALID_INPUT),
        (InvalidAuthorizationCodeError("x"), ErrorCategory.INVALID_INPUT),
        (UnauthorizedError("x"), ErrorCategory.UNAUTHORIZED),
        (StoreNotFoundError("x"), ErrorCategory.NOT_FOUND),
        (VendorNotFoundError("x"), ErrorCategory.NOT_FOUND),
        (PaymentGatewayError("x"), ErrorCategory.UPSTREAM_ERROR),
        (PaymentDeclinedError("x"), ErrorCategory.UPSTREAM_ERROR),
        (DatastoreError("x"), ErrorCategory.UPSTREAM_ERROR),
        (PartialWriteError("x", "s", ()), ErrorCategory.UPSTREAM_ERROR),
        (PaymentPendingError("x", "ch_1", "pending"), ErrorCategory.PENDING),
    ],
)
def test_category(error: DomainException, category: ErrorCategory) -> None:
    assert error.category is category


def test_hierarchy() -> None:
    assert issubclass(InvalidAuthorizationCodeError, InvalidInputError)
    assert issubclass(StoreNotFoundError, NotFoundError)
    assert issubclass(PartialWriteError, UpstreamError)
    assert issubclass(PaymentDeclinedError, DomainException)


def test_message_property() -> None:
    assert PaymentDeclinedError("Your card was declined.").message == "Your card was declined."


def test_invalid_input_carries_fields() -> None:
    error = InvalidInputError("Missing required fields: amount", ("amount",))

    assert error.fields == ("amount",)


def test_gateway_error_carries_status() -> None:
    assert PaymentGatewayError("bad code", http_status=400).http_status == 400
