"""Unit tests for app.schemas.validators and the request schemas built on them."""

import unittest
from decimal import Decimal

from pydantic import ValidationError

from app.schemas.auth import LoginRequest, RegisterRequest
from app.schemas.payments import PaymentCreateRequest, SwiftSubmitRequest
from app.schemas.validators import (
    validate_account_number,
    validate_amount,
    validate_currency,
    validate_full_name,
    validate_id_number,
    validate_password,
    validate_payee_account_info,
    validate_swift_code,
    validate_username,
)
from support import payment_payload, registration_payload


class TestAmount(unittest.TestCase):
    """Amounts are positive with at most two decimal places, stored to exactly two."""

    def test_two_decimal_places_kept_exactly(self) -> None:
        self.assertEqual(validate_amount("100.45"), Decimal("100.45"))

    def test_whole_number_padded_to_two_places(self) -> None:
        amount = validate_amount("100")
        self.assertEqual(amount, Decimal("100"))
        self.assertEqual(str(amount), "100.00")

    def test_json_number_accepted(self) -> None:
        self.assertEqual(validate_amount(250.5), Decimal("250.50"))
        self.assertEqual(validate_amount(7), Decimal("7.00"))

    def test_rejects_zero_negative_and_non_numeric(self) -> None:
        for value in ("0", "0.00", "-5", "-0.01", "abc", "", "NaN", "1e3", None, True):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_amount(value)

    def test_rejects_three_decimal_places(self) -> None:
        with self.assertRaises(ValueError):
            validate_amount("100.455")

    def test_integer_part_limited_to_column_precision(self) -> None:
        self.assertEqual(validate_amount("9999999999.99"), Decimal("9999999999.99"))
        for value in ("10000000000", "12345678901234567.89", 12345678901234567):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_amount(value)

    def test_rejects_non_ascii_digits(self) -> None:
        for value in ("\u0661\u0660\u0660", "\uff11\uff10\uff10.50"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_amount(value)


class TestSwiftCode(unittest.TestCase):
    def test_eight_and_eleven_characters_accepted(self) -> None:
        self.assertEqual(validate_swift_code("BOFAUS3N"), "BOFAUS3N")
        self.assertEqual(validate_swift_code("BOFAUS3NXXX"), "BOFAUS3NXXX")

    def test_normalized_to_upper_case(self) -> None:
        self.assertEqual(validate_swift_code(" bofaus3n "), "BOFAUS3N")

    def test_other_lengths_rejected(self) -> None:
        for value in ("BOFA", "BOFAUS3NX", "BOFAUS3NXX", "BOFAUS3NXXXX", "BOFA-S3N"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_swift_code(value)


class TestIdentityFields(unittest.TestCase):
    def test_full_name(self) -> None:
        self.assertEqual(validate_full_name("  Mary-Jane O'Neil "), "Mary-Jane O'Neil")
        for value in ("J", "John3", "A" * 51, "<script>"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_full_name(value)

    def test_id_number_exactly_thirteen_digits(self) -> None:
        self.assertEqual(validate_id_number("9001015800087"), "9001015800087")
        for value in ("900101580008", "90010158000870", "900101580008A"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_id_number(value)

    def test_account_number(self) -> None:
        self.assertEqual(validate_account_number("12345678"), "12345678")
        for value in ("1234567", "1" * 21, "1234abcd"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_account_number(value)

    def test_digit_fields_accept_only_ascii_digits(self) -> None:
        arabic_indic_id = "\u0661\u0662\u0663\u0664\u0665\u0666\u0667\u0668\u0669\u0660\u0661\u0662\u0663"
        fullwidth_account = "\uff11\uff12\uff13\uff14\uff15\uff16\uff17\uff18"
        with self.assertRaises(ValueError):
            validate_id_number(arabic_indic_id)
        with self.assertRaises(ValueError):
            validate_account_number(fullwidth_account)
        with self.assertRaises(ValueError):
            validate_password("Password\u0661")

    def test_username_case_folded(self) -> None:
        self.assertEqual(validate_username(" Jane_Doe "), "jane_doe")
        for value in ("ab", "a" * 31, "jane.doe", "jane doe"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_username(value)

    def test_password_strength(self) -> None:
        self.assertEqual(validate_password("Password1"), "Password1")
        for value in ("Pass1", "password1", "PASSWORD1", "Password"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_password(value)


class TestPaymentFields(unittest.TestCase):
    def test_currency_normalized(self) -> None:
        self.assertEqual(validate_currency("usd"), "USD")
        for value in ("US", "USDT", "U5D"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_currency(value)

    def test_payee_account_info(self) -> None:
        self.assertEqual(validate_payee_account_info(" GB29 NWBK 6016 "), "GB29 NWBK 6016")
        for value in ("AB12", "A" * 35, "GB29-NWBK"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    validate_payee_account_info(value)


class TestRequestSchemas(unittest.TestCase):
    """Schemas normalize fields and report every failing field."""

    def test_register_normalizes_username(self) -> None:
        body = RegisterRequest(**registration_payload(username="Customer_One"))
        self.assertEqual(body.username, "customer_one")

    def test_register_reports_each_invalid_field(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            RegisterRequest(**registration_payload(id_number="123", password="weak"))
        fields = {err["loc"][0] for err in ctx.exception.errors()}
        self.assertEqual(fields, {"id_number", "password"})

    def test_register_requires_all_fields(self) -> None:
        payload = registration_payload()
        del payload["account_number"]
        with self.assertRaises(ValidationError):
            RegisterRequest(**payload)

    def test_login_lowercases_username_and_requires_password(self) -> None:
        self.assertEqual(LoginRequest(username="Employee1", password="x").username, "employee1")
        with self.assertRaises(ValidationError):
            LoginRequest(username="employee1", password="")
        with self.assertRaises(ValidationError):
            LoginRequest(username="no", password="Password123")

    def test_payment_request_normalizes(self) -> None:
        body = PaymentCreateRequest(**payment_payload(currency="eur", swift_code="bofaus3nxxx"))
        self.assertEqual(body.amount, Decimal("100.45"))
        self.assertEqual(body.currency, "EUR")
        self.assertEqual(body.swift_code, "BOFAUS3NXXX")

    def test_payment_request_rejects_bad_amounts(self) -> None:
        for amount in ("0", "-10", "abc", "100.455"):
            with self.subTest(amount=amount):
                with self.assertRaises(ValidationError):
                    PaymentCreateRequest(**payment_payload(amount=amount))

    def test_swift_submit_requires_ids(self) -> None:
        with self.assertRaises(ValidationError):
            SwiftSubmitRequest(paymentIds=[])
        self.assertEqual(SwiftSubmitRequest(paymentIds=[1, 2]).paymentIds, [1, 2])


if __name__ == "__main__":
    unittest.main()
