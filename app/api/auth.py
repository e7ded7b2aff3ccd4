"""Registration, login, profile and the access-control dependencies.

Authentication: a missing bearer credential is 401, a credential that fails
signature or expiry checks is 403. Role gates trust the role embedded in the
token at issuance; it is not re-read from the database per request.
"""

from collections.abc import Callable
from typing import Annotated

import jwt
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.database import get_db
from app.core.errors import ForbiddenError, UnauthorizedError
from app.core.security import decode_access_token
from app.models.user import ROLE_CUSTOMER, ROLE_EMPLOYEE
from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserOut,
)
from app.services.auth import get_current_user_profile, login_user, register_user

router = APIRouter()
security = HTTPBearer(auto_error=False)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """Register a customer account. Employees are never created through this route."""
    user, token = register_user(db, settings, body)
    return AuthResponse(
        message="User registered successfully",
        user=UserOut.model_validate(user),
        token=token,
    )


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthResponse:
    """
    Authenticate with username and password; returns a JWT session token.
    Include the token in the Authorization header as: Bearer <token>
    """
    user, token = login_user(db, settings, body.username, body.password)
    return AuthResponse(
        message="Login successful",
        user=UserOut.model_validate(user),
        token=token,
    )


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT and return the identity it carries."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access token required")
    try:
        payload = decode_access_token(credentials.credentials, settings)
    except jwt.PyJWTError as e:
        raise ForbiddenError(INVALID_TOKEN_MESSAGE) from e
    try:
        user_id = int(payload.get("userId", payload["sub"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ForbiddenError(INVALID_TOKEN_MESSAGE) from e
    username = payload.get("username")
    role = payload.get("role")
    if not isinstance(username, str) or not isinstance(role, str):
        raise ForbiddenError(INVALID_TOKEN_MESSAGE)
    return CurrentUser(id=user_id, username=username, role=role)


def require_role(role: str, message: str) -> Callable[..., CurrentUser]:
    """Build a dependency that admits only authenticated users with the given role."""

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role != role:
            raise ForbiddenError(message)
        return current_user

    dependency.__name__ = f"require_{role}"
    return dependency


require_customer = require_role(ROLE_CUSTOMER, "Access denied. Customer account required.")
require_employee = require_role(ROLE_EMPLOYEE, "Access denied. Employee privileges required.")


@router.get("/me", response_model=MeResponse)
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MeResponse:
    """Current user's profile, re-read from the database."""
    user = get_current_user_profile(db, current_user.id)
    return MeResponse(user=UserOut.model_validate(user))
