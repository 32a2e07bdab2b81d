"""Authentication routes (register, login, me)."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_user_repo
from api.models import (
    ClaimsResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
    UserSummary,
)
from api.security import get_current_claims
from domain.model.errors import AuthenticationError, DuplicateError, ValidationError
from domain.model.user import User
from port.user_repository import UserRepository
from services import auth_service
from services.token_service import TokenClaims


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _to_response(user: User) -> UserResponse:
    """Convert domain User to API UserResponse."""
    return UserResponse(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        is_active=user.is_active,
        provider=user.provider,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, repo: UserRepository = Depends(get_user_repo)):
    """Register a new user.

    Returns:
        The created user, without any credential material

    Raises:
        HTTPException: 409 Conflict if email already exists, 400 Bad Request if the password is rejected
    """
    try:
        user = auth_service.register(
            repo,
            email=request.email,
            password=request.password,
            name=request.name,
            role=request.role,
        )
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return _to_response(user)


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
def login(request: LoginRequest, repo: UserRepository = Depends(get_user_repo)):
    """Login user and return JWT token.

    Raises:
        HTTPException: 401 if credentials are invalid
    """
    try:
        result = auth_service.login(repo, email=request.email, password=request.password)
    except AuthenticationError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    profile = result.user
    return LoginResponse(
        access_token=result.access_token,
        user=UserSummary(id=profile.id, email=profile.email, name=profile.name, role=profile.role),
    )


@router.get("/me", response_model=ClaimsResponse)
def get_me(claims: TokenClaims = Depends(get_current_claims)):
    """Get the identity claims of the current bearer token."""
    return ClaimsResponse(sub=claims.sub, email=claims.email, role=claims.role)
