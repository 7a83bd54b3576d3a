from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clerc_core.domain.value_objects import SecretName


class SecretStore(ABC):
    """Port for named secrets kept in the datastore.

    Contract:
    - get_secret() returns None (and logs) when the secret is missing;
      the caller decides whether that is fatal
    - No caching: secrets are read once, at startup
    """

    @abstractmethod
    def get_secret(self, name: SecretName) -> str | None:
        """Return the secret's value, or None if it is not stored."""
