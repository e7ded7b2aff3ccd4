"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserOut,
)
from app.schemas.health import HealthResponse
from app.schemas.payments import (
    PaymentCreateRequest,
    PaymentListResponse,
    PaymentOut,
    PaymentResponse,
    PaymentStatus,
    PendingPaymentListResponse,
    PendingPaymentOut,
    SwiftSubmissionError,
    SwiftSubmissionResult,
    SwiftSubmitRequest,
    SwiftSubmitResponse,
)

__all__ = [
    "AuthResponse",
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "PaymentCreateRequest",
    "PaymentListResponse",
    "PaymentOut",
    "PaymentResponse",
    "PaymentStatus",
    "PendingPaymentListResponse",
    "PendingPaymentOut",
    "RegisterRequest",
    "SwiftSubmissionError",
    "SwiftSubmissionResult",
    "SwiftSubmitRequest",
    "SwiftSubmitResponse",
    "UserOut",
]
