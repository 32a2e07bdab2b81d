"""Auth service — registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from dataclasses import dataclass

import bcrypt

from domain.model.errors import AuthenticationError, DuplicateError, ValidationError
from domain.model.user import (
    DEFAULT_ROLE,
    FederatedIdentity,
    LocalCredential,
    User,
    UserProfile,
)
from port.user_repository import UserRepository
from services.token_service import create_access_token

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class LoginResult:
    access_token: str
    user: UserProfile


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    encoded = plain.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, hashed.encode("utf-8"))


# Checked against when there is no stored hash so every path pays for one bcrypt round.
_DUMMY_HASH = hash_password("authgate-dummy-password")


def _validate_password(password: str) -> None:
    if not password:
        raise ValidationError("Password must not be empty")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")


def validate_credentials(repo: UserRepository, email: str, password: str) -> UserProfile | None:
    """Return the user profile if email and password match an active local account.

    The profile carries no credential material.

    Returns None for an unknown email, a federated account, an inactive
    account or a wrong password, without telling them apart.
    """
    user = repo.get_by_email(email)
    if user is None or user.password_hash is None:
        verify_password(password, _DUMMY_HASH)
        return None

    if not verify_password(password, user.password_hash):
        return None
    if not user.is_active:
        return None
    return user.to_profile()


def login(repo: UserRepository, email: str, password: str) -> LoginResult:
    """Authenticate and issue an access token.

    Raises:
        AuthenticationError: invalid credentials (deliberately vague)
    """
    profile = validate_credentials(repo, email, password)
    if profile is None:
        logger.info("Login rejected", extra={"email": email})
        raise AuthenticationError("Invalid email or password")

    token = create_access_token(profile)
    logger.info("User logged in", extra={"userId": profile.id, "email": email})
    return LoginResult(access_token=token, user=profile)


def register(
    repo: UserRepository,
    email: str,
    password: str,
    name: str | None = None,
    role: str | None = None,
) -> User:
    """Register a new local-password user.

    Returns the created User domain object.

    Raises:
        DuplicateError: email already registered
        ValidationError: password is empty or too long for bcrypt
    """
    _validate_password(password)
    credential = LocalCredential(password_hash=hash_password(password))

    user = repo.create(email=email, credential=credential, name=name, role=role or DEFAULT_ROLE)
    logger.info("User registered", extra={"userId": user.id, "email": email})
    return user


def sign_in_federated(
    repo: UserRepository,
    email: str,
    provider_ref: str,
    name: str | None = None,
) -> User:
    """Find or create the account for a federated sign-in.

    The first sign-in creates the account; later sign-ins with the same
    provider reference return it.

    Raises:
        DuplicateError: email already belongs to a local account or another identity
    """
    identity = FederatedIdentity(provider_ref=provider_ref)
    existing = repo.get_by_email(email)
    if existing is not None:
        if existing.credential != identity:
            logger.warning("Federated sign-in conflicts with existing account", extra={"email": email})
            raise DuplicateError("Email already registered")
        return existing

    user = repo.create(email=email, credential=identity, name=name, role=DEFAULT_ROLE)
    logger.info("Federated user created", extra={"userId": user.id, "email": email})
    return user
