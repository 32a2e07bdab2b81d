"""JWT access token issuing and verification."""

import os
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from domain.model.user import UserProfile

logger = logging.getLogger(__name__)

# JWT Configuration
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")
if not JWT_SECRET_KEY:
    raise ValueError(
        "JWT_SECRET_KEY environment variable is required. "
        "Generate a secure key with: openssl rand -hex 32"
    )
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_MINUTES = int(os.getenv("JWT_EXPIRATION_MINUTES", "60"))


@dataclass(frozen=True)
class TokenClaims:
    """Identity asserted by a verified access token."""
    sub: str
    email: str
    role: str


def create_access_token(user: UserProfile, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT carrying the user's id, email and role.

    Takes the credential-free profile; tokens never see password material.
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta if expires_delta is not None else timedelta(minutes=JWT_EXPIRATION_MINUTES))
    payload = {
        "sub": user.id,
        "email": user.email,
        "role": user.role,
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(payload, JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims | None:
    """Verify signature and expiry. Return the claims, or None if the token is unusable."""
    try:
        payload = jwt.decode(token, JWT_SECRET_KEY, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        return None

    sub, email, role = payload.get("sub"), payload.get("email"), payload.get("role")
    if not sub or not email or not role:
        logger.debug("JWT missing identity claims")
        return None
    return TokenClaims(sub=sub, email=email, role=role)
