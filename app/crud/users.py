"""User (credential store) data access."""

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.errors import NotFoundError
from app.models.user import ROLE_CUSTOMER, ROLE_EMPLOYEE, User


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def create_user(
    db: Session,
    *,
    full_name: str,
    id_number: str,
    account_number: str,
    username: str,
    password_hash: str,
    role: str = ROLE_CUSTOMER,
) -> User:
    """
    Insert and commit a user row.

    Unique violations surface as sqlalchemy.exc.IntegrityError; the caller
    decides how to report them and must roll the session back.
    """
    user = User(
        full_name=full_name,
        id_number=id_number,
        account_number=account_number,
        username=username,
        password_hash=password_hash,
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def list_employees(db: Session) -> list[User]:
    """Employees, newest first."""
    return (
        db.query(User)
        .filter(User.role == ROLE_EMPLOYEE)
        .order_by(User.created_at.desc(), User.id.desc())
        .all()
    )


def update_user_role(db: Session, user_id: int, role: str) -> User:
    """Administrative helper; no HTTP endpoint changes roles."""
    changed = (
        db.query(User)
        .filter(User.id == user_id)
        .update({User.role: role}, synchronize_session=False)
    )
    db.commit()
    if changed == 0:
        raise NotFoundError("User not found")
    user = get_user_by_id(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def assign_default_roles(db: Session) -> int:
    """Give the customer role to legacy rows stored without one. Returns rows changed."""
    changed = (
        db.query(User)
        .filter(or_(User.role.is_(None), User.role == ""))
        .update({User.role: ROLE_CUSTOMER}, synchronize_session=False)
    )
    db.commit()
    return changed
