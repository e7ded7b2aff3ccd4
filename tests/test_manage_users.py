"""Tests for the user administration CLI (app.scripts.manage_users)."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from app.crud import users as users_crud
from app.models.user import ROLE_CUSTOMER, ROLE_EMPLOYEE
from app.schemas.validators import validate_account_number, validate_full_name, validate_id_number
from app.scripts.manage_users import DEMO_EMPLOYEES, main
from support import add_user, make_database


class ManageUsersTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.database = make_database()
        self.addCleanup(self.database.dispose)

    def run_cli(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(list(argv), database=self.database)
        return code, out.getvalue(), err.getvalue()

    def user(self, username: str):
        db = self.database.session()
        try:
            return users_crud.get_user_by_username(db, username)
        finally:
            db.close()


class TestSeedEmployees(ManageUsersTestCase):
    def test_seed_is_idempotent(self) -> None:
        code, out, _ = self.run_cli("seed-employees")
        self.assertEqual(code, 0)
        self.assertIn("employee1", out)
        self.assertEqual(self.user("employee1").role, ROLE_EMPLOYEE)
        self.assertEqual(self.user("employee2").role, ROLE_EMPLOYEE)

        code, out, _ = self.run_cli("seed-employees")
        self.assertEqual(code, 0)
        self.assertIn("already exists", out)

    def test_seeded_employees_pass_field_rules(self) -> None:
        for employee in DEMO_EMPLOYEES:
            with self.subTest(username=employee["username"]):
                self.assertEqual(validate_account_number(employee["account_number"]), employee["account_number"])
                self.assertEqual(validate_id_number(employee["id_number"]), employee["id_number"])
                self.assertEqual(validate_full_name(employee["full_name"]), employee["full_name"])

    def test_list_employees(self) -> None:
        self.run_cli("seed-employees")
        code, out, _ = self.run_cli("list-employees")
        self.assertEqual(code, 0)
        self.assertIn("employee1", out)
        self.assertIn("employee2", out)


class TestCreate(ManageUsersTestCase):
    def test_create_employee(self) -> None:
        code, _, _ = self.run_cli(
            "create",
            "Teller_1",
            "Password123",
            "--full-name", "Tom Teller",
            "--id-number", "8001015800081",
            "--account-number", "55550001",
            "--role", "employee",
        )
        self.assertEqual(code, 0)
        self.assertEqual(self.user("teller_1").role, ROLE_EMPLOYEE)

    def test_create_rejects_weak_password(self) -> None:
        code, _, err = self.run_cli(
            "create",
            "teller_2",
            "weak",
            "--full-name", "Tom Teller",
            "--id-number", "8001015800081",
            "--account-number", "55550001",
        )
        self.assertEqual(code, 1)
        self.assertIn("Password", err)
        self.assertIsNone(self.user("teller_2"))

    def test_create_reports_duplicate_account_number(self) -> None:
        db = self.database.session()
        existing = add_user(db, 1)
        account_number = existing.account_number
        db.close()
        code, _, err = self.run_cli(
            "create",
            "someone_else",
            "Password123",
            "--full-name", "Sam Else",
            "--id-number", "8001015800081",
            "--account-number", account_number,
        )
        self.assertEqual(code, 1)
        self.assertIn("Account number already exists", err)


class TestRoles(ManageUsersTestCase):
    def test_set_role(self) -> None:
        db = self.database.session()
        add_user(db, 1)
        db.close()
        code, _, _ = self.run_cli("set-role", "customer1", "employee")
        self.assertEqual(code, 0)
        self.assertEqual(self.user("customer1").role, ROLE_EMPLOYEE)

    def test_set_role_unknown_user(self) -> None:
        code, _, err = self.run_cli("set-role", "ghost", "employee")
        self.assertEqual(code, 1)
        self.assertIn("not found", err)

    def test_fix_roles_assigns_customer(self) -> None:
        db = self.database.session()
        user = add_user(db, 1)
        user.role = None
        db.commit()
        db.close()
        code, out, _ = self.run_cli("fix-roles")
        self.assertEqual(code, 0)
        self.assertIn("Updated 1", out)
        self.assertEqual(self.user("customer1").role, ROLE_CUSTOMER)


if __name__ == "__main__":
    unittest.main()
