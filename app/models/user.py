"""ORM model for bank portal users (customers and employees)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base

ROLE_CUSTOMER = "customer"
ROLE_EMPLOYEE = "employee"
USER_ROLES = (ROLE_CUSTOMER, ROLE_EMPLOYEE)


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'customer' (self-registered) or 'employee' (pre-seeded)
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(50), nullable=False)
    id_number = Column(String(13), nullable=False, unique=True, index=True)
    account_number = Column(String(20), nullable=False, unique=True, index=True)
    username = Column(String(30), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=True, default=ROLE_CUSTOMER, server_default=ROLE_CUSTOMER)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
