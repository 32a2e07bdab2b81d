"""SQLAlchemy implementation of UserRepository."""

from datetime import datetime, timezone
from logging import getLogger

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from adapter.sql.models import UserRecord
from domain.model.errors import DuplicateError
from domain.model.user import (
    DEFAULT_ROLE,
    Credential,
    FederatedIdentity,
    LocalCredential,
    User,
)

logger = getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    """SQLite drops the offset of DateTime(timezone=True); stored values are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlUserRepository:
    def __init__(self, session: Session):
        self.session = session

    def _to_domain(self, record: UserRecord) -> User:
        """Convert a users row to the User domain model."""
        if record.password is not None:
            credential: Credential = LocalCredential(password_hash=record.password)
        else:
            credential = FederatedIdentity(provider_ref=record.external_id)
        return User(
            id=record.id,
            email=record.email,
            credential=credential,
            created_at=_as_utc(record.created_at),
            updated_at=_as_utc(record.updated_at),
            name=record.name,
            role=record.role,
            is_active=record.is_active,
        )

    def create(
        self,
        email: str,
        credential: Credential,
        name: str | None = None,
        role: str | None = None,
    ) -> User:
        """Insert a new user and return the User object."""
        record = UserRecord(
            email=email,
            password=credential.password_hash if isinstance(credential, LocalCredential) else None,
            external_id=credential.provider_ref if isinstance(credential, FederatedIdentity) else None,
            name=name,
            role=role or DEFAULT_ROLE,
            is_active=True,
        )
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            # The credential check constraint always holds for a domain Credential,
            # so only the unique indexes on email / external_id can fail here.
            logger.warning("User creation failed: unique constraint", extra={"email": email})
            if isinstance(credential, FederatedIdentity) and self.get_by_email(email) is None:
                raise DuplicateError("External identity already linked") from e
            raise DuplicateError("Email already registered") from e

        self.session.refresh(record)
        logger.info("User created", extra={"userId": record.id, "email": email})
        return self._to_domain(record)

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        record = self.session.scalars(select(UserRecord).where(UserRecord.email == email)).first()
        return self._to_domain(record) if record else None

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        record = self.session.get(UserRecord, user_id)
        return self._to_domain(record) if record else None
