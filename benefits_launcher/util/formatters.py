""" Response formatting helpers... """

# Python Packages
from datetime import date, datetime
from typing import Optional





def format_datetime(value: Optional[datetime]) -> Optional[str]:
    """ Datetime Format... """

    return value.strftime("%Y-%m-%d %H:%M:%S") if value else None


def format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def format_us_date(value: Optional[date]) -> str:
    """ MM/DD/YYYY, as carrier forms expect... """

    return value.strftime("%m/%d/%Y") if value else ""


def ssn_last4(ssn: Optional[str]) -> Optional[str]:
    if not ssn:
        return None
    digits = "".join(ch for ch in ssn if ch.isdigit())
    return digits[-4:] if len(digits) >= 4 else None


def cents_to_dollars(cents: Optional[int]) -> Optional[float]:
    return round(cents / 100, 2) if cents is not None else None
