"""ORM model for international payment requests."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, func

from app.models.base import Base

STATUS_PENDING = "pending"
STATUS_VERIFIED = "verified"
STATUS_SUBMITTED = "submitted_to_swift"
PAYMENT_STATUSES = (STATUS_PENDING, STATUS_VERIFIED, STATUS_SUBMITTED)


class Payment(Base):
    """
    Payment created by a customer and moved forward by employees.

    status: pending -> verified -> submitted_to_swift
    """

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False)
    payee_account_info = Column(String(34), nullable=False)
    swift_code = Column(String(11), nullable=False)
    status = Column(
        String(32),
        nullable=False,
        default=STATUS_PENDING,
        server_default=STATUS_PENDING,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
