"""Payment store data access."""

from decimal import Decimal

from sqlalchemy import Row
from sqlalchemy.orm import Session

from app.models.payment import STATUS_PENDING, Payment
from app.models.user import User

# Largest value an Integer id column holds on every supported database.
MAX_PAYMENT_ID = 2**31 - 1


def _storable_id(payment_id: int) -> bool:
    return 0 < payment_id <= MAX_PAYMENT_ID


def create_payment(
    db: Session,
    *,
    user_id: int,
    amount: Decimal,
    currency: str,
    payee_account_info: str,
    swift_code: str,
) -> Payment:
    """Insert a payment with status pending and return the committed row."""
    payment = Payment(
        user_id=user_id,
        amount=amount,
        currency=currency,
        payee_account_info=payee_account_info,
        swift_code=swift_code,
        status=STATUS_PENDING,
    )
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


def get_payment(db: Session, payment_id: int) -> Payment | None:
    if not _storable_id(payment_id):
        return None
    return db.query(Payment).filter(Payment.id == payment_id).first()


def list_payments_for_user(db: Session, user_id: int) -> list[Payment]:
    """Payments owned by user_id, newest first."""
    return (
        db.query(Payment)
        .filter(Payment.user_id == user_id)
        .order_by(Payment.created_at.desc(), Payment.id.desc())
        .all()
    )


def list_pending_payments(db: Session) -> list[Row]:
    """
    Pending payments joined with the owner, oldest first (review queue).

    Each row has ``Payment``, ``full_name`` and ``user_account_number``.
    """
    return (
        db.query(
            Payment,
            User.full_name,
            User.account_number.label("user_account_number"),
        )
        .join(User, Payment.user_id == User.id)
        .filter(Payment.status == STATUS_PENDING)
        .order_by(Payment.created_at.asc(), Payment.id.asc())
        .all()
    )


def update_payment_status(db: Session, payment_id: int, status: str) -> int:
    """Set status unconditionally and commit. Returns the affected row count."""
    if not _storable_id(payment_id):
        return 0
    changed = (
        db.query(Payment)
        .filter(Payment.id == payment_id)
        .update({Payment.status: status}, synchronize_session=False)
    )
    db.commit()
    return changed
