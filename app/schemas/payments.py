"""Request/response schemas for payment lifecycle endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field

from app.schemas.validators import (
    validate_amount,
    validate_currency,
    validate_payee_account_info,
    validate_swift_code,
)

PaymentStatus = Literal["pending", "verified", "submitted_to_swift"]


class PaymentCreateRequest(BaseModel):
    """Customer payment request. Amount may be sent as a JSON string or number."""

    amount: Annotated[Decimal, BeforeValidator(validate_amount)] = Field(
        ..., description="Positive amount with at most 2 decimal places"
    )
    currency: Annotated[str, AfterValidator(validate_currency)] = Field(
        ..., description="ISO 4217 code, e.g. USD"
    )
    payee_account_info: Annotated[str, AfterValidator(validate_payee_account_info)] = Field(
        ..., description="Payee account (alphanumeric and spaces, 5-34 chars)"
    )
    swift_code: Annotated[str, AfterValidator(validate_swift_code)] = Field(
        ..., description="SWIFT/BIC code, 8 or 11 alphanumeric characters"
    )


class PaymentOut(BaseModel):
    """Payment row as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    amount: Decimal
    currency: str
    payee_account_info: str
    swift_code: str
    status: PaymentStatus
    created_at: datetime | None = None


class PendingPaymentOut(PaymentOut):
    """Pending payment joined with the owning customer's name and account."""

    full_name: str
    user_account_number: str


class PaymentResponse(BaseModel):
    success: bool = True
    message: str
    payment: PaymentOut


class PaymentListResponse(BaseModel):
    success: bool = True
    payments: list[PaymentOut]


class PendingPaymentListResponse(BaseModel):
    success: bool = True
    payments: list[PendingPaymentOut]


class SwiftSubmitRequest(BaseModel):
    """Employee batch submission of payment ids to the (mock) SWIFT network."""

    paymentIds: list[int] = Field(..., min_length=1, description="Payment ids to submit")


class SwiftSubmissionError(BaseModel):
    paymentId: int
    error: str


class SwiftSubmissionResult(BaseModel):
    """Outcome of a batch submission; each id is attempted independently."""

    completed: int = 0
    errors: list[SwiftSubmissionError] = Field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return len(self.errors) > 0


class SwiftSubmitResponse(BaseModel):
    """
    200 body carries submitted_count; the 207 (partial) body carries
    completed and errors instead.
    """

    success: bool = True
    message: str
    submitted_count: int | None = None
    completed: int | None = None
    errors: list[SwiftSubmissionError] | None = None
