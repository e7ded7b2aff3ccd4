"""
User administration (there is no employee registration UI). Run from project root:
  python -m app.scripts.manage_users create USERNAME PASSWORD --full-name NAME \
      --id-number ID --account-number ACCOUNT [--role employee]
  python -m app.scripts.manage_users seed-employees
  python -m app.scripts.manage_users set-role USERNAME employee
  python -m app.scripts.manage_users fix-roles
  python -m app.scripts.manage_users list-employees
"""
import argparse
import sys
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import Database
from app.core.errors import NotFoundError
from app.core.security import hash_password
from app.crud import users as users_crud
from app.models.user import ROLE_EMPLOYEE, USER_ROLES
from app.schemas.validators import (
    validate_account_number,
    validate_full_name,
    validate_id_number,
    validate_password,
    validate_username,
)
from app.services.auth import conflict_message

# Demo employee accounts created by seed-employees.
DEMO_EMPLOYEES = (
    {
        "full_name": "John Employee",
        "id_number": "9001015800087",
        "account_number": "9000000001",
        "username": "employee1",
        "password": "Employee123",
    },
    {
        "full_name": "Sarah Manager",
        "id_number": "8505125900088",
        "account_number": "9000000002",
        "username": "employee2",
        "password": "Employee123",
    },
)


def _create(db: Session, args: argparse.Namespace, rounds: int) -> int:
    try:
        username = validate_username(args.username)
        password = validate_password(args.password)
        full_name = validate_full_name(args.full_name)
        id_number = validate_id_number(args.id_number)
        account_number = validate_account_number(args.account_number)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1
    if users_crud.get_user_by_username(db, username) is not None:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    try:
        users_crud.create_user(
            db,
            full_name=full_name,
            id_number=id_number,
            account_number=account_number,
            username=username,
            password_hash=hash_password(password, rounds=rounds),
            role=args.role,
        )
    except IntegrityError as e:
        db.rollback()
        print(conflict_message(e), file=sys.stderr)
        return 1
    print(f"Created user '{username}' with role '{args.role}'.")
    return 0


def _seed_employees(db: Session, rounds: int) -> int:
    for employee in DEMO_EMPLOYEES:
        if users_crud.get_user_by_username(db, employee["username"]) is not None:
            print(f"Employee '{employee['username']}' already exists.")
            continue
        user = users_crud.create_user(
            db,
            full_name=employee["full_name"],
            id_number=employee["id_number"],
            account_number=employee["account_number"],
            username=employee["username"],
            password_hash=hash_password(employee["password"], rounds=rounds),
            role=ROLE_EMPLOYEE,
        )
        print(f"Created employee '{user.username}' (id {user.id}).")
    return 0


def _set_role(db: Session, args: argparse.Namespace) -> int:
    user = users_crud.get_user_by_username(db, args.username.strip().lower())
    if user is None:
        print(f"User '{args.username}' not found.", file=sys.stderr)
        return 1
    try:
        users_crud.update_user_role(db, user.id, args.role)
    except NotFoundError as e:
        print(e.message, file=sys.stderr)
        return 1
    print(f"User '{user.username}' now has role '{args.role}'.")
    return 0


def _fix_roles(db: Session) -> int:
    changed = users_crud.assign_default_roles(db)
    if changed:
        print(f"Updated {changed} user(s) to have 'customer' role.")
    else:
        print("No users needed updating.")
    return 0


def _list_employees(db: Session) -> int:
    for user in users_crud.list_employees(db):
        print(f"{user.id:<4} {user.username:<16} {user.full_name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage Bank Portal users.")
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create a user")
    create.add_argument("username", help="Username (3-30 chars: letters, digits, underscore)")
    create.add_argument("password", help="Password (8+ chars with upper, lower and digit)")
    create.add_argument("--full-name", required=True)
    create.add_argument("--id-number", required=True, help="13-digit ID number")
    create.add_argument("--account-number", required=True, help="8-20 digit account number")
    create.add_argument("--role", default="customer", choices=USER_ROLES)

    commands.add_parser("seed-employees", help="Create the demo employee accounts")

    set_role = commands.add_parser("set-role", help="Change a user's role")
    set_role.add_argument("username")
    set_role.add_argument("role", choices=USER_ROLES)

    commands.add_parser("fix-roles", help="Assign 'customer' to users without a role")
    commands.add_parser("list-employees", help="List employee accounts")
    return parser


def main(argv: Sequence[str] | None = None, database: Database | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    database = database or Database(settings.DATABASE_URL)
    database.create_all()
    db = database.session()
    try:
        if args.command == "create":
            return _create(db, args, settings.BCRYPT_ROUNDS)
        if args.command == "seed-employees":
            return _seed_employees(db, settings.BCRYPT_ROUNDS)
        if args.command == "set-role":
            return _set_role(db, args)
        if args.command == "fix-roles":
            return _fix_roles(db)
        return _list_employees(db)
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
