"""
Field Validators

Small predicate helpers shared by the validation classes of every module.
Each returns True / False; the validation classes decide which message to raise.
"""

# Python Packages
import re
from datetime import date, datetime
from typing import Optional





EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z]{2,}$")
SSN_PATTERN = re.compile(r"^\d{3}-?\d{2}-?\d{4}$")
EIN_PATTERN = re.compile(r"^\d{2}-?\d{7}$")
ZIP_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")
HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&]).{8,}$")
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")

US_STATES = {
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL", "GA", "HI", "ID",
    "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO",
    "MT", "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA",
    "RI", "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY"
}

INDUSTRIES = {
    "agriculture", "mining", "utilities", "construction", "manufacturing",
    "wholesale", "retail", "transportation", "information", "finance",
    "realestate", "professional", "management", "administrative", "educational",
    "healthcare", "arts", "accommodation", "other", "public", "technology",
    "consulting", "nonprofit"
}



def is_valid_email(value: str) -> bool:
    return bool(value) and bool(EMAIL_PATTERN.match(value.strip()))


def digits_only(value: str) -> str:
    return re.sub(r"\D", "", value or "")


def is_valid_phone(value: str) -> bool:
    """ US numbers: 10 digits, or 11 with a leading 1... """

    digits = digits_only(value)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]
    return len(digits) == 10


def format_phone(value: str) -> str:
    """
    Render a phone number as (XXX) XXX-XXXX.
    Partial input is formatted as far as it goes.
    """

    digits = digits_only(value)
    if len(digits) == 11 and digits.startswith("1"):
        digits = digits[1:]

    if len(digits) < 4:
        return digits
    if len(digits) <= 6:
        return f"({digits[:3]}) {digits[3:]}"
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:10]}"


def is_valid_ssn(value: str) -> bool:
    return bool(value) and bool(SSN_PATTERN.match(value.strip()))


def is_valid_ein(value: str) -> bool:
    return bool(value) and bool(EIN_PATTERN.match(value.strip()))


def is_valid_zip(value: str) -> bool:
    return bool(value) and bool(ZIP_PATTERN.match(str(value).strip()))


def is_valid_state(value: str) -> bool:
    return bool(value) and value.strip().upper() in US_STATES


def is_valid_industry(value: str) -> bool:
    return bool(value) and value.strip().lower() in INDUSTRIES


def whole_number(value) -> Optional[int]:
    """ 60, "60" and "60.0" -> 60; fractions, booleans and text -> None... """

    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else None


def is_valid_percentage(value) -> bool:
    """ Whole percentage 0..100 """

    number = whole_number(value)
    return number is not None and 0 <= number <= 100


def is_strong_password(value: str) -> bool:
    return bool(value) and bool(PASSWORD_PATTERN.match(value))


def is_valid_hex_color(value: str) -> bool:
    return bool(value) and bool(HEX_COLOR_PATTERN.match(value))


def parse_date(value) -> Optional[date]:
    """
    Accept ISO (YYYY-MM-DD) and US (MM/DD/YYYY) dates.
    Returns None when the value cannot be parsed.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        return None

    text = str(value).strip()
    for fmt in ("%Y-%m-%d", "%m/%d/%Y", "%Y-%m-%dT%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def is_valid_date(value) -> bool:
    return parse_date(value) is not None


def sanitize_text(value):
    """ Strip whitespace and HTML tags from free text; other types pass through... """

    if not isinstance(value, str):
        return value
    return HTML_TAG_PATTERN.sub("", value).strip()


def sanitize_payload(payload, raw_fields = ()):
    """ Recursively sanitize every string inside a JSON payload; keys in raw_fields keep their value... """

    if isinstance(payload, dict):
        return {
            key: value if key in raw_fields else sanitize_payload(value, raw_fields)
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [sanitize_payload(item, raw_fields) for item in payload]
    return sanitize_text(payload)


def file_extension(filename: str) -> str:
    if not filename or "." not in filename:
        return ""
    return filename.rsplit(".", 1)[-1].lower()
