"""Use cases - One class per operation exposed to the transport layer."""

from clerc_core.application.use_cases.authenticate_session import AuthenticateSessionUseCase
from clerc_core.application.use_cases.create_charge import CreateChargeUseCase
from clerc_core.application.use_cases.issue_session_token import IssueSessionTokenUseCase
from clerc_core.application.use_cases.onboard_vendor import OnboardVendorUseCase

__all__ = [
    "AuthenticateSessionUseCase",
    "CreateChargeUseCase",
    "IssueSessionTokenUseCase",
    "OnboardVendorUseCase",
]
