"""Shared builders for tests: settings, an in-memory database, users and payloads."""

from typing import Any

from fastapi import FastAPI

from app.core.config import Settings
from app.core.database import Database
from app.core.security import create_access_token, hash_password
from app.crud import users as users_crud
from app.models.user import ROLE_CUSTOMER, ROLE_EMPLOYEE, User

TEST_PASSWORD = "Password123"


def make_settings(**overrides: Any) -> Settings:
    """Settings for tests: in-memory SQLite, cheap bcrypt, fixed secret, no .env."""
    values: dict[str, Any] = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "BCRYPT_ROUNDS": 4,
        "JWT_SECRET": "test-secret",
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_database() -> Database:
    """Fresh in-memory database with all tables created."""
    database = Database("sqlite://")
    database.create_all()
    return database


def make_app(settings: Settings | None = None) -> FastAPI:
    from app.main import create_app

    settings = settings or make_settings()
    return create_app(settings, database=Database(settings.DATABASE_URL))


def registration_payload(n: int = 1, **overrides: str) -> dict[str, str]:
    """Valid registration body; n keeps the unique fields distinct."""
    payload = {
        "full_name": "Jane Customer",
        "id_number": f"{9001015800000 + n:013d}",
        "account_number": f"{10000000 + n}",
        "username": f"customer{n}",
        "password": TEST_PASSWORD,
    }
    payload.update(overrides)
    return payload


def payment_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "amount": "100.45",
        "currency": "USD",
        "payee_account_info": "GB29NWBK60161331926819",
        "swift_code": "BOFAUS3N",
    }
    payload.update(overrides)
    return payload


def add_user(
    db: Any,
    n: int = 1,
    role: str = ROLE_CUSTOMER,
    full_name: str = "Jane Customer",
) -> User:
    """Insert a user directly (bypassing registration), e.g. a seeded employee."""
    data = registration_payload(n)
    prefix = "employee" if role == ROLE_EMPLOYEE else "customer"
    return users_crud.create_user(
        db,
        full_name=full_name,
        id_number=data["id_number"],
        account_number=data["account_number"],
        username=f"{prefix}{n}",
        password_hash=hash_password(TEST_PASSWORD, rounds=4),
        role=role,
    )


def bearer(user_id: int, username: str, role: str, settings: Settings) -> dict[str, str]:
    token = create_access_token(user_id=user_id, username=username, role=role, settings=settings)
    return {"Authorization": f"Bearer {token}"}
