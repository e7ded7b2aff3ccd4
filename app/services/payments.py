"""Payment lifecycle: create, list, verify and batch-submit to the mock SWIFT network.

States move pending -> verified -> submitted_to_swift. Transitions are written
unconditionally (re-verifying or re-submitting rewrites the same status) and a
batch submission commits each payment on its own, so partial completion is a
normal outcome.
"""

import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import InvalidInputError, NotFoundError
from app.crud import payments as payments_crud
from app.models.payment import STATUS_SUBMITTED, STATUS_VERIFIED, Payment
from app.schemas.payments import (
    PaymentCreateRequest,
    PendingPaymentOut,
    SwiftSubmissionError,
    SwiftSubmissionResult,
)
from app.schemas.validators import AMOUNT_QUANTUM

logger = logging.getLogger(__name__)

PAYMENT_NOT_FOUND_MESSAGE = "Payment not found"


def create_payment(db: Session, owner_id: int, data: PaymentCreateRequest) -> Payment:
    """Insert a pending payment for owner_id with the amount fixed to 2 decimal places."""
    amount = Decimal(data.amount)
    if not amount.is_finite() or amount <= 0:
        raise InvalidInputError("Amount must be a positive number")
    payment = payments_crud.create_payment(
        db,
        user_id=owner_id,
        amount=amount.quantize(AMOUNT_QUANTUM),
        currency=data.currency,
        payee_account_info=data.payee_account_info,
        swift_code=data.swift_code,
    )
    logger.info(
        "Payment created",
        extra={"payment_id": payment.id, "user_id": owner_id, "currency": payment.currency},
    )
    return payment


def list_payments_for_owner(db: Session, owner_id: int) -> list[Payment]:
    return payments_crud.list_payments_for_user(db, owner_id)


def list_pending(db: Session) -> list[PendingPaymentOut]:
    """FIFO review queue of pending payments with the owner's name and account."""
    rows = payments_crud.list_pending_payments(db)
    return [
        PendingPaymentOut(
            id=payment.id,
            user_id=payment.user_id,
            amount=payment.amount,
            currency=payment.currency,
            payee_account_info=payment.payee_account_info,
            swift_code=payment.swift_code,
            status=payment.status,
            created_at=payment.created_at,
            full_name=full_name,
            user_account_number=user_account_number,
        )
        for payment, full_name, user_account_number in rows
    ]


def verify_payment(db: Session, payment_id: int) -> Payment:
    """Mark a payment verified whatever its current status."""
    if payments_crud.update_payment_status(db, payment_id, STATUS_VERIFIED) == 0:
        raise NotFoundError(PAYMENT_NOT_FOUND_MESSAGE)
    payment = payments_crud.get_payment(db, payment_id)
    if payment is None:
        raise NotFoundError(PAYMENT_NOT_FOUND_MESSAGE)
    logger.info("Payment verified", extra={"payment_id": payment_id})
    return payment


def submit_to_swift(db: Session, payment_ids: list[int]) -> SwiftSubmissionResult:
    """
    Move each payment to submitted_to_swift independently.

    Duplicate ids are attempted once. Unknown ids and store failures are
    collected as errors; payments already updated stay updated.
    """
    result = SwiftSubmissionResult()
    for payment_id in dict.fromkeys(payment_ids):
        try:
            changed = payments_crud.update_payment_status(db, payment_id, STATUS_SUBMITTED)
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(
                "SWIFT submission failed for payment_id=%s: %s", payment_id, e
            )
            result.errors.append(
                SwiftSubmissionError(paymentId=payment_id, error="Failed to update payment")
            )
            continue
        if changed == 0:
            result.errors.append(
                SwiftSubmissionError(paymentId=payment_id, error=PAYMENT_NOT_FOUND_MESSAGE)
            )
        else:
            result.completed += 1

    submit_status = "partial" if result.is_partial else "success"
    logger.info(
        "SWIFT batch submission completed",
        extra={
            "submit_status": submit_status,
            "completed_count": result.completed,
            "error_count": len(result.errors),
        },
    )
    return result
