"""Whitelist field rules shared by request schemas and the admin CLI.

Each ``validate_*`` function trims and normalizes its input, checks it against
a whitelist pattern, and returns the normalized value or raises ValueError
with a client-facing message.
"""

import re
from decimal import Decimal, InvalidOperation

FULL_NAME_PATTERN = re.compile(r"^[A-Za-z\s\-']{2,50}$", re.ASCII)
ID_NUMBER_PATTERN = re.compile(r"^[0-9]{13}$")
ACCOUNT_NUMBER_PATTERN = re.compile(r"^[0-9]{8,20}$")
USERNAME_PATTERN = re.compile(r"^[a-z0-9_]{3,30}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9]).{8,}$")
# Ten integer digits fit the Numeric(12, 2) amount column.
AMOUNT_PATTERN = re.compile(r"^[0-9]{1,10}(\.[0-9]{1,2})?$")
CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")
PAYEE_ACCOUNT_PATTERN = re.compile(r"^[A-Za-z0-9 ]{5,34}$")
SWIFT_CODE_PATTERN = re.compile(r"^[A-Z0-9]{8}([A-Z0-9]{3})?$")

AMOUNT_QUANTUM = Decimal("0.01")


def _require_str(value: object) -> str:
    if not isinstance(value, str):
        raise ValueError("must be a string")
    return value


def validate_full_name(value: object) -> str:
    name = _require_str(value).strip()
    if not FULL_NAME_PATTERN.fullmatch(name):
        raise ValueError(
            "Full name must contain only letters, spaces, hyphens, and apostrophes (2-50 characters)"
        )
    return name


def validate_id_number(value: object) -> str:
    id_number = _require_str(value).strip()
    if not ID_NUMBER_PATTERN.fullmatch(id_number):
        raise ValueError("ID number must be exactly 13 digits")
    return id_number


def validate_account_number(value: object) -> str:
    account_number = _require_str(value).strip()
    if not ACCOUNT_NUMBER_PATTERN.fullmatch(account_number):
        raise ValueError("Account number must contain only digits (8-20 characters)")
    return account_number


def validate_username(value: object) -> str:
    """Usernames are case-folded to lowercase before matching."""
    username = _require_str(value).strip().lower()
    if not USERNAME_PATTERN.fullmatch(username):
        raise ValueError(
            "Username must be 3-30 characters (letters, numbers, underscores only)"
        )
    return username


def validate_password(value: object) -> str:
    password = _require_str(value)
    if not PASSWORD_PATTERN.fullmatch(password):
        raise ValueError(
            "Password must be at least 8 characters with uppercase, lowercase, and number"
        )
    return password


def validate_amount(value: object) -> Decimal:
    """
    Accept a JSON string or number with at most two decimal places.

    Returns the amount quantized to exactly two places. Zero and negative
    values are rejected here; NaN and exponents never match the pattern.
    """
    message = "Amount must be a positive number with up to 2 decimal places"
    if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
        raise ValueError(message)
    text = str(value).strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        raise ValueError(message)
    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(message) from e
    if amount <= 0:
        raise ValueError(message)
    return amount.quantize(AMOUNT_QUANTUM)


def validate_currency(value: object) -> str:
    currency = _require_str(value).strip().upper()
    if not CURRENCY_PATTERN.fullmatch(currency):
        raise ValueError("Currency must be a 3-letter code (e.g., USD, EUR, ZAR)")
    return currency


def validate_payee_account_info(value: object) -> str:
    info = _require_str(value).strip()
    if not PAYEE_ACCOUNT_PATTERN.fullmatch(info):
        raise ValueError("Account info must be 5-34 alphanumeric characters")
    return info


def validate_swift_code(value: object) -> str:
    code = _require_str(value).strip().upper()
    if not SWIFT_CODE_PATTERN.fullmatch(code):
        raise ValueError("SWIFT code must be 8 or 11 alphanumeric characters")
    return code
