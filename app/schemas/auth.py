"""Request/response schemas for auth endpoints."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

from app.schemas.validators import (
    validate_account_number,
    validate_full_name,
    validate_id_number,
    validate_password,
    validate_username,
)


class RegisterRequest(BaseModel):
    """Customer self-registration payload."""

    full_name: Annotated[str, AfterValidator(validate_full_name)] = Field(
        ..., description="Legal name (letters, spaces, hyphens, apostrophes)"
    )
    id_number: Annotated[str, AfterValidator(validate_id_number)] = Field(
        ..., description="13-digit national identity number"
    )
    account_number: Annotated[str, AfterValidator(validate_account_number)] = Field(
        ..., description="Bank account number (8-20 digits)"
    )
    username: Annotated[str, AfterValidator(validate_username)] = Field(
        ..., description="Username (3-30 chars, lowercased)"
    )
    password: Annotated[str, AfterValidator(validate_password)] = Field(
        ..., description="Password (8+ chars, upper, lower, digit)"
    )


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., description="Username")
    password: str = Field(..., min_length=1, description="Password")

    @field_validator("username")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        try:
            return validate_username(v)
        except ValueError as e:
            raise ValueError("Invalid username format") from e


class CurrentUser(BaseModel):
    """Identity carried by a verified session token (id, username, role)."""

    id: int
    username: str
    role: str


class UserOut(BaseModel):
    """User projection returned to clients (no id number, no password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    username: str
    account_number: str
    role: str

    @field_validator("role", mode="before")
    @classmethod
    def default_role(cls, v: str | None) -> str:
        # Rows created before roles existed behave as customers.
        return v or "customer"


class AuthResponse(BaseModel):
    """Returned by register and login: the user plus a fresh bearer token."""

    success: bool = True
    message: str
    user: UserOut
    token: str = Field(..., description="JWT bearer token valid for 24 hours")


class MeResponse(BaseModel):
    success: bool = True
    user: UserOut
