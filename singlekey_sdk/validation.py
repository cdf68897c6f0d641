"""Validation helpers for screening request data."""

import calendar
import re
from datetime import date
from typing import Optional

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[a-zA-Z]{2,5}$")
_POSTAL_CODE_RE = re.compile(r"^[A-Z]\d[A-Z]\s?\d[A-Z]\d$", re.IGNORECASE)
_ZIP_CODE_RE = re.compile(r"^\d{5}(-\d{4})?$")
_NON_DIGIT_RE = re.compile(r"\D")

MINIMUM_AGE = 18


def _digits(value: str) -> str:
    return _NON_DIGIT_RE.sub("", value)


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def is_valid_phone(phone: str) -> bool:
    """Phone numbers have 10 digits, or 11 with a country code."""
    return len(_digits(phone)) in (10, 11)


def normalize_phone(phone: str) -> str:
    """Strip formatting and a leading North American country code."""
    digits = _digits(phone)
    if len(digits) == 11 and digits.startswith("1"):
        return digits[1:]
    return digits


def calculate_age(year: int, month: int, day: int, today: Optional[date] = None) -> int:
    today = today or date.today()
    age = today.year - year
    if (today.month, today.day) < (month, day):
        age -= 1
    return age


def is_valid_date_of_birth(
    year: int, month: int, day: int, today: Optional[date] = None
) -> tuple[bool, Optional[str]]:
    """
    Validate an applicant's date of birth.

    Returns:
        ``(valid, error)`` where ``error`` explains the first failed check
    """
    today = today or date.today()

    if year < 1900 or year > today.year:
        return False, "Invalid year"
    if month < 1 or month > 12:
        return False, "Month must be between 1 and 12"

    days_in_month = calendar.monthrange(year, month)[1]
    if day < 1 or day > days_in_month:
        return False, f"Day must be between 1 and {days_in_month} for this month"

    if calculate_age(year, month, day, today) < MINIMUM_AGE:
        return False, f"Applicant must be at least {MINIMUM_AGE} years old"

    return True, None


def is_valid_sin(sin: str) -> bool:
    """SIN/SSN must have 9 digits."""
    return len(_digits(sin)) == 9


def normalize_sin(sin: str) -> str:
    return _digits(sin)


def is_valid_address(address: str) -> tuple[bool, Optional[str]]:
    """Addresses need street, city, and province/state separated by commas."""
    if not address or not address.strip():
        return False, "Address is required"

    parts = [part.strip() for part in address.split(",")]
    if len(parts) < 3:
        return False, "Address must include street, city, and province/state separated by commas"

    return True, None


def format_address(street: str, city: str, province_state: str, country: str, postal_zip: str) -> str:
    """Format address as "Street, City, Province/State, Country, Postal/Zip"."""
    return f"{street}, {city}, {province_state}, {country}, {postal_zip}"


def is_valid_postal_code(postal_code: str) -> bool:
    """Canadian postal code, e.g. M5V 1A1."""
    return bool(_POSTAL_CODE_RE.match(postal_code))


def is_valid_zip_code(zip_code: str) -> bool:
    """US ZIP or ZIP+4."""
    return bool(_ZIP_CODE_RE.match(zip_code))


def is_valid_card_expiration(month: int, year: int, today: Optional[date] = None) -> bool:
    if month < 1 or month > 12:
        return False

    today = today or date.today()
    return (year, month) >= (today.year, today.month)
