from enum import StrEnum


class SecretName(StrEnum):
    """Names of the documents in the secrets collection."""

    JWT_KEY = "JWT_KEY"
    STRIPE_API_SECRET = "STRIPE_API_SECRET"
    MAILGUN = "MAILGUN"
