"""User domain model.

A user authenticates either with a local password or through a federated
identity provider, never both. The credential is a tagged union so the
two cases cannot be mixed up.
"""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_ROLE = 'task_logger'


@dataclass(frozen=True)
class LocalCredential:
    """Password login. Holds a bcrypt hash, never the plaintext."""
    password_hash: str

    def __repr__(self) -> str:
        return 'LocalCredential(password_hash=***)'


@dataclass(frozen=True)
class FederatedIdentity:
    """Login delegated to a third-party identity provider."""
    provider_ref: str


Credential = LocalCredential | FederatedIdentity


@dataclass(frozen=True)
class UserProfile:
    """Public projection of a user. Carries no credential material."""
    id: str
    email: str
    name: str | None
    role: str


@dataclass
class User:
    """Domain model representing a user."""
    id: str
    email: str
    credential: Credential
    created_at: datetime
    updated_at: datetime
    name: str | None = None
    role: str = DEFAULT_ROLE
    is_active: bool = True

    @property
    def password_hash(self) -> str | None:
        if isinstance(self.credential, LocalCredential):
            return self.credential.password_hash
        return None

    @property
    def provider(self) -> str:
        if isinstance(self.credential, FederatedIdentity):
            return 'federated'
        return 'email'

    def to_profile(self) -> UserProfile:
        return UserProfile(id=self.id, email=self.email, name=self.name, role=self.role)
