"""Data Transfer Objects for use case input/output.

Requests are parsed from the generic JSON mappings handed over by the
transport layer. Parsing rejects missing or blank fields with
InvalidInputError before any use case touches the datastore or gateway.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from clerc_core.domain.exceptions import InvalidInputError

if TYPE_CHECKING:
    from collections.abc import Mapping


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def _require(payload: Mapping[str, Any], names: tuple[str, ...]) -> None:
    missing = tuple(name for name in names if _is_blank(payload.get(name)))
    if missing:
        raise InvalidInputError(f"Missing required fields: {', '.join(missing)}", missing)


def _text(payload: Mapping[str, Any], name: str) -> str:
    value = payload[name]
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a string", (name,))
    return value.strip()


def _optional_text(payload: Mapping[str, Any], name: str) -> str | None:
    if _is_blank(payload.get(name)):
        return None
    return _text(payload, name)


def _optional_id(payload: Mapping[str, Any], name: str) -> str | None:
    value = _optional_text(payload, name)
    if value is not None and "/" in value:
        raise InvalidInputError(f"{name} cannot contain '/'", (name,))
    return value


def _amount(value: Any) -> int:
    # bool is an int subclass; True must not become a one-cent charge
    if isinstance(value, bool):
        raise InvalidInputError("amount must be an integer number of minor units", ("amount",))
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if not isinstance(value, int):
        raise InvalidInputError("amount must be an integer number of minor units", ("amount",))
    if value <= 0:
        raise InvalidInputError(f"amount must be greater than 0, got {value}", ("amount",))
    return value


@dataclass(frozen=True, slots=True)
class IssueSessionTokenRequest:
    """Input DTO for the IssueSessionToken use case."""

    user_id: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> IssueSessionTokenRequest:
        _require(payload, ("user_id",))
        return cls(user_id=_text(payload, "user_id"))


@dataclass(frozen=True, slots=True)
class SessionTokenResponse:
    """Output DTO for the IssueSessionToken use case."""

    token: str
    expires_in: int

    def to_dict(self) -> dict[str, Any]:
        return {"token": self.token, "expires_in": self.expires_in}


@dataclass(frozen=True, slots=True)
class ChargeRequest:
    """Input DTO for the CreateCharge use case.

    ``user_id`` is the verified session owner, never read from the payload.
    ``connected_vendor_id`` is the vendor's connected account on the gateway.
    """

    user_id: str
    customer_id: str
    connected_vendor_id: str
    payment_source: str
    amount: int
    store_id: str | None = None

    REQUIRED_FIELDS = ("customer_id", "connected_vendor_id", "payment_source", "amount")

    @classmethod
    def from_payload(cls, user_id: str, payload: Mapping[str, Any]) -> ChargeRequest:
        _require(payload, cls.REQUIRED_FIELDS)
        return cls(
            user_id=user_id,
            customer_id=_text(payload, "customer_id"),
            connected_vendor_id=_text(payload, "connected_vendor_id"),
            payment_source=_text(payload, "payment_source"),
            amount=_amount(payload["amount"]),
            store_id=_optional_id(payload, "store_id"),
        )


@dataclass(frozen=True, slots=True)
class ChargeResponse:
    """Output DTO for the CreateCharge use case."""

    charge_id: str
    status: str
    application_fee_amount: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "charge_id": self.charge_id,
            "status": self.status,
            "application_fee_amount": self.application_fee_amount,
        }


@dataclass(frozen=True, slots=True)
class OnboardVendorRequest:
    """Input DTO for the OnboardVendor use case.

    When ``store_name`` is given the vendor's store is created as well.
    """

    account_auth_code: str
    vendor_name: str
    store_name: str | None = None
    default_currency: str | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> OnboardVendorRequest:
        _require(payload, ("account_auth_code", "vendor_name"))
        currency = _optional_text(payload, "default_currency")
        return cls(
            account_auth_code=_text(payload, "account_auth_code"),
            vendor_name=_text(payload, "vendor_name"),
            store_name=_optional_text(payload, "store_name"),
            default_currency=currency.lower() if currency else None,
        )


@dataclass(frozen=True, slots=True)
class OnboardVendorResponse:
    """Output DTO for the OnboardVendor use case."""

    vendor_id: str
    store_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"vendor_id": self.vendor_id}
        if self.store_id is not None:
            body["store_id"] = self.store_id
        return body
