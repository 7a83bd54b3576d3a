from abc import ABC, abstractmethod


class IdentityValidator(ABC):
    """Port answering whether a user id names a known customer or vendor."""

    @abstractmethod
    def is_valid_user(self, user_id: str) -> bool:
        """Return True if user_id is an existing customer or vendor."""
