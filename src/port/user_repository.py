from typing import Protocol
from domain.model.user import Credential, User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def create(
        self,
        email: str,
        credential: Credential,
        name: str | None = None,
        role: str | None = None,
    ) -> User:
        """Create a new user. Raise DuplicateError if the email is taken."""
        ...

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        ...

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...
