"""
Common Value Parsers

Pure functions turning loosely typed JSON values into domain values:
- parse_price: optional non-negative amount
- parse_positive_int: optional whole number >= 1
- parse_day: calendar date from an ISO string
- parse_text / parse_text_list: optional strings and string sequences

Each parser raises ``InvalidInput`` with a specific code and never
touches the database.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from django.utils.dateparse import parse_date, parse_datetime

from shared.domain.errors import InvalidInput


def is_missing(value: Any) -> bool:
    """True for absent, null and whitespace-only values."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_price(value: Any) -> Optional[Decimal]:
    """
    Price as sent by the client

    Absent or empty means "no price". Anything else must be a finite,
    non-negative number (numeric strings are accepted).
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise InvalidInput("invalid_price", "Price must be a positive number")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidInput("invalid_price", "Price must be a positive number")
    if not amount.is_finite() or amount < 0:
        raise InvalidInput("invalid_price", "Price must be a positive number")
    return amount.quantize(Decimal("0.01"))


def parse_positive_int(value: Any, field: str, default: Optional[int] = None) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise InvalidInput("invalid_input", f"{field} must be a whole number")
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidInput("invalid_input", f"{field} must be a whole number")
    if not number.is_finite() or number != number.to_integral_value() or number < 1:
        raise InvalidInput("invalid_input", f"{field} must be a whole number of at least 1")
    return int(number)


def parse_day(value: Any, field: str) -> date:
    """Accepts ``YYYY-MM-DD`` or a full ISO timestamp."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidInput("invalid_date", f"{field} must be a date")
    text = value.strip()
    try:
        parsed = parse_date(text)
        if parsed is None:
            moment = parse_datetime(text.replace("Z", "+00:00"))
            parsed = moment.date() if moment is not None else None
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidInput("invalid_date", f"{field} must be a date")
    return parsed


def parse_text(value: Any, field: str) -> str:
    """Optional scalar rendered as text; absent becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise InvalidInput("invalid_input", f"{field} must be text")
    return str(value)


def parse_text_list(value: Any, field: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise InvalidInput("invalid_input", f"{field} must be a list of strings")
    return list(value)
