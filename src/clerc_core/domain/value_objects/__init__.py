"""Value objects - Immutable objects defined by their attributes."""

from clerc_core.domain.value_objects.fee_schedule import FeeSchedule
from clerc_core.domain.value_objects.secret_name import SecretName
from clerc_core.domain.value_objects.session import INVALID_TOKEN, InvalidToken
from clerc_core.domain.value_objects.store_list_policy import StoreListPolicy

__all__ = [
    "INVALID_TOKEN",
    "FeeSchedule",
    "InvalidToken",
    "SecretName",
    "StoreListPolicy",
]
