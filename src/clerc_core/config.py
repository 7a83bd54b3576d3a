"""Process-wide configuration.

Settings come from the environment (optionally a .env file) and are read
once at startup. Secrets live in the datastore and are loaded separately
into RuntimeSecrets by the bootstrap. Both objects are passed explicitly to
the components that need them; nothing reads configuration from globals.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from clerc_core.domain.exceptions import ConfigurationError
from clerc_core.domain.value_objects import FeeSchedule, StoreListPolicy

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_SESSION_TTL_SECONDS = 60
DEFAULT_PLATFORM_FEE_CENTS = 50
DEFAULT_CURRENCY = "usd"
TRUE_VALUES = ("true", "1", "yes")
FALSE_VALUES = ("false", "0", "no")


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings loaded from environment variables."""

    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database_name: str = "paywithclerc"
    default_currency: str = DEFAULT_CURRENCY
    platform_fee_cents: int = DEFAULT_PLATFORM_FEE_CENTS
    session_ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS
    jwt_algorithm: str = "HS256"
    stripe_api_base: str = "https://api.stripe.com"
    stripe_connect_base: str = "https://connect.stripe.com"
    gateway_timeout_seconds: float = 30.0
    atomic_store_writes: bool = True
    store_list_policy: StoreListPolicy = StoreListPolicy.OVERWRITE
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.platform_fee_cents < 0:
            raise ConfigurationError(
                f"platform_fee_cents cannot be negative, got {self.platform_fee_cents}"
            )
        if self.session_ttl_seconds <= 0:
            raise ConfigurationError(
                f"session_ttl_seconds must be positive, got {self.session_ttl_seconds}"
            )
        if self.gateway_timeout_seconds <= 0:
            raise ConfigurationError(
                f"gateway_timeout_seconds must be positive, got {self.gateway_timeout_seconds}"
            )
        if not self.default_currency:
            raise ConfigurationError("default_currency cannot be empty")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from the environment.

        Args:
            environ: Variables to read. Defaults to os.environ after loading
                     a .env file from the working directory, if present.

        Raises:
            ConfigurationError: A variable is present but malformed.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        defaults = cls()

        return cls(
            mongo_uri=environ.get("MONGO_URI", defaults.mongo_uri),
            mongo_database_name=environ.get("DB_NAME", defaults.mongo_database_name),
            default_currency=environ.get(
                "CLERC_DEFAULT_CURRENCY", defaults.default_currency
            ).lower(),
            platform_fee_cents=_int(
                environ, "CLERC_PLATFORM_FEE_CENTS", defaults.platform_fee_cents
            ),
            session_ttl_seconds=_int(
                environ, "CLERC_SESSION_TTL_SECONDS", defaults.session_ttl_seconds
            ),
            jwt_algorithm=environ.get("CLERC_JWT_ALG", defaults.jwt_algorithm),
            stripe_api_base=environ.get("STRIPE_API_BASE", defaults.stripe_api_base).rstrip("/"),
            stripe_connect_base=environ.get(
                "STRIPE_CONNECT_BASE", defaults.stripe_connect_base
            ).rstrip("/"),
            gateway_timeout_seconds=_float(
                environ, "CLERC_GATEWAY_TIMEOUT_SECONDS", defaults.gateway_timeout_seconds
            ),
            atomic_store_writes=_bool(
                environ, "CLERC_ATOMIC_STORE_WRITES", defaults.atomic_store_writes
            ),
            store_list_policy=_store_list_policy(environ, defaults.store_list_policy),
            log_level=environ.get("LOG_LEVEL", defaults.log_level).upper(),
        )

    @property
    def platform_fee(self) -> FeeSchedule:
        return FeeSchedule.fixed(self.platform_fee_cents)


@dataclass(frozen=True, slots=True)
class RuntimeSecrets:
    """Secrets loaded from the datastore at startup. Never logged."""

    signing_key: str
    stripe_api_secret: str
    mailgun_key: str | None = None

    def __repr__(self) -> str:
        return "RuntimeSecrets(<redacted>)"


def _int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _store_list_policy(environ: Mapping[str, str], default: StoreListPolicy) -> StoreListPolicy:
    raw = environ.get("CLERC_STORE_LIST_POLICY")
    if raw is None or raw.strip() == "":
        return default
    try:
        return StoreListPolicy(raw.strip().lower())
    except ValueError as e:
        allowed = ", ".join(policy.value for policy in StoreListPolicy)
        raise ConfigurationError(
            f"CLERC_STORE_LIST_POLICY must be one of {allowed}, got {raw!r}"
        ) from e
