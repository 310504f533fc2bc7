"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Optional

MONTH_NAMES = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)


def month_name(day: date) -> str:
    """Upper-case English month name, independent of the process locale"""
    return MONTH_NAMES[day.month - 1]


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD string.

    Returns None for a missing or empty value; raises ValueError when the
    value is present but not an ISO calendar date.
    """
    if value is None or value == "":
        return None
    if len(value) != 10:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    return datetime.strptime(value, "%Y-%m-%d").date()
