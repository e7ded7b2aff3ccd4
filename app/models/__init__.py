"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.payment import Payment
from app.models.user import User

__all__ = ["Base", "Payment", "User"]
