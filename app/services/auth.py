"""Auth service: customer registration, login and current-user lookup."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, InternalError, NotFoundError, UnauthorizedError
from app.core.security import create_access_token, hash_password, verify_password
from app.crud import users as users_crud
from app.models.user import ROLE_CUSTOMER, User
from app.schemas.auth import RegisterRequest

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"

# Column name fragment in the driver's unique-violation message -> client message.
_UNIQUE_FIELD_MESSAGES = (
    ("username", "Username already exists"),
    ("account_number", "Account number already exists"),
    ("id_number", "ID number already exists"),
)


def conflict_message(error: IntegrityError) -> str:
    """Name the colliding field from a unique-violation error (SQLite or PostgreSQL)."""
    text = str(error.orig) if error.orig is not None else str(error)
    for column, message in _UNIQUE_FIELD_MESSAGES:
        if column in text:
            return message
    return "Duplicate entry"


def issue_token(user: User, settings: "Settings") -> str:
    return create_access_token(
        user_id=user.id,
        username=user.username,
        role=user.role or ROLE_CUSTOMER,
        settings=settings,
    )


def register_user(
    db: Session, settings: "Settings", data: RegisterRequest
) -> tuple[User, str]:
    """
    Create a customer account and issue its first session token.

    The username check is read-then-write; a concurrent duplicate is caught
    by the store's unique constraint and reported the same way.
    """
    if users_crud.get_user_by_username(db, data.username) is not None:
        logger.info("Registration rejected: username taken", extra={"username": data.username})
        raise ConflictError("Username already exists")

    try:
        user = users_crud.create_user(
            db,
            full_name=data.full_name,
            id_number=data.id_number,
            account_number=data.account_number,
            username=data.username,
            password_hash=hash_password(data.password, rounds=settings.BCRYPT_ROUNDS),
            role=ROLE_CUSTOMER,
        )
    except IntegrityError as e:
        db.rollback()
        message = conflict_message(e)
        logger.info("Registration rejected: %s", message, extra={"username": data.username})
        raise ConflictError(message) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Registration failed for username=%s", data.username)
        raise InternalError("Internal server error during registration") from e

    logger.info("User registered", extra={"user_id": user.id, "username": user.username})
    return user, issue_token(user, settings)


def login_user(
    db: Session, settings: "Settings", username: str, password: str
) -> tuple[User, str]:
    """Check credentials and issue a fresh token reflecting the stored role."""
    user = users_crud.get_user_by_username(db, username)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"username": username})
        raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
    return user, issue_token(user, settings)


def get_current_user_profile(db: Session, user_id: int) -> User:
    """Re-read the user row by the id embedded in the token."""
    user = users_crud.get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
