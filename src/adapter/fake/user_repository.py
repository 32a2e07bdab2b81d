"""In-memory implementation of UserRepository for testing."""

import uuid
from datetime import datetime, timezone

from domain.model.errors import DuplicateError
from domain.model.user import DEFAULT_ROLE, Credential, FederatedIdentity, User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(
        self,
        email: str,
        credential: Credential,
        name: str | None = None,
        role: str | None = None,
    ) -> User:
        if any(u.email == email for u in self.store.values()):
            raise DuplicateError("Email already registered")
        if isinstance(credential, FederatedIdentity) and any(
            u.credential == credential for u in self.store.values()
        ):
            raise DuplicateError("External identity already linked")

        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)

        user = User(
            id=user_id,
            email=email,
            credential=credential,
            created_at=now,
            updated_at=now,
            name=name,
            role=role or DEFAULT_ROLE,
        )
        self.store[user_id] = user
        return user

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        return self.store.get(user_id)
