"""Payment endpoints: customer creation/history, employee review and SWIFT submission."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.auth import require_customer, require_employee
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.payments import (
    PaymentCreateRequest,
    PaymentListResponse,
    PaymentOut,
    PaymentResponse,
    PendingPaymentListResponse,
    SwiftSubmitRequest,
    SwiftSubmitResponse,
)
from app.services import payments as payment_service

router = APIRouter()


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def create_payment(
    body: PaymentCreateRequest,
    db: Annotated[Session, Depends(get_db)],
    customer: Annotated[CurrentUser, Depends(require_customer)],
) -> PaymentResponse:
    """Create a pending international payment for the calling customer."""
    payment = payment_service.create_payment(db, customer.id, body)
    return PaymentResponse(
        message="Payment created successfully",
        payment=PaymentOut.model_validate(payment),
    )


@router.get("/my-payments", response_model=PaymentListResponse)
def my_payments(
    db: Annotated[Session, Depends(get_db)],
    customer: Annotated[CurrentUser, Depends(require_customer)],
) -> PaymentListResponse:
    """The calling customer's payments, newest first."""
    payments = payment_service.list_payments_for_owner(db, customer.id)
    return PaymentListResponse(payments=[PaymentOut.model_validate(p) for p in payments])


@router.get("/pending", response_model=PendingPaymentListResponse)
def pending_payments(
    db: Annotated[Session, Depends(get_db)],
    _employee: Annotated[CurrentUser, Depends(require_employee)],
) -> PendingPaymentListResponse:
    """Pending payments across all customers, oldest first."""
    return PendingPaymentListResponse(payments=payment_service.list_pending(db))


@router.put("/{payment_id}/verify", response_model=PaymentResponse)
def verify_payment(
    payment_id: int,
    db: Annotated[Session, Depends(get_db)],
    _employee: Annotated[CurrentUser, Depends(require_employee)],
) -> PaymentResponse:
    payment = payment_service.verify_payment(db, payment_id)
    return PaymentResponse(
        message="Payment verified successfully",
        payment=PaymentOut.model_validate(payment),
    )


@router.post(
    "/submit-to-swift",
    response_model=SwiftSubmitResponse,
    response_model_exclude_none=True,
    responses={207: {"model": SwiftSubmitResponse, "description": "Partial success"}},
)
def submit_to_swift(
    body: SwiftSubmitRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    _employee: Annotated[CurrentUser, Depends(require_employee)],
) -> SwiftSubmitResponse:
    """
    Submit payments to the mock SWIFT network.

    Each id is processed on its own. When every id succeeds the response is
    200 with submitted_count; otherwise 207 with completed and errors.
    """
    result = payment_service.submit_to_swift(db, body.paymentIds)
    if result.is_partial:
        response.status_code = status.HTTP_207_MULTI_STATUS
        return SwiftSubmitResponse(
            message=f"Submitted {result.completed} payments, {len(result.errors)} failed",
            completed=result.completed,
            errors=result.errors,
        )
    return SwiftSubmitResponse(
        message=f"Successfully submitted {result.completed} payments to SWIFT",
        submitted_count=result.completed,
    )
