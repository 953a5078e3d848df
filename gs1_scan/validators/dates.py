"""
GS1 date handling.

- YYMMDD conversion for AI (17) with the day-zero rule (DD=00 means the
  last day of the month)
- Expiry status classification for received lots
"""

from __future__ import annotations

import re
from calendar import monthrange
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta


# YY <= 49 -> 20YY, YY >= 50 -> 19YY
CENTURY_PIVOT = 50

_YYMMDD = re.compile(r"[0-9]{6}")

EXPIRED = "Expired"
NEAR_EXPIRY = "Near Expiry"
VALID = "Valid"
UNKNOWN = "Unknown"


def yymmdd_to_date(value: str) -> Optional[date]:
    """
    Convert a GS1 YYMMDD string to a date.

    Day 00 resolves to the last day of the given month. Returns None when
    the value is not six digits or does not describe a calendar date.

    Examples:
        >>> yymmdd_to_date("261231")
        datetime.date(2026, 12, 31)
        >>> yymmdd_to_date("250900")
        datetime.date(2025, 9, 30)
    """
    if not value or not _YYMMDD.fullmatch(value):
        return None

    yy = int(value[0:2])
    mm = int(value[2:4])
    dd = int(value[4:6])

    year = 2000 + yy if yy < CENTURY_PIVOT else 1900 + yy

    if mm < 1 or mm > 12:
        return None
    if dd < 0 or dd > 31:
        return None

    last_day = monthrange(year, mm)[1]
    if dd == 0:
        dd = last_day
    elif dd > last_day:
        return None

    return date(year, mm, dd)


def expiry_status(
    expiry_date: Optional[date],
    near_months: int,
    today: Optional[date] = None,
) -> str:
    """
    Returns: Valid, Near Expiry, Expired, Unknown
    """
    if expiry_date is None:
        return UNKNOWN
    today = today or date.today()
    if expiry_date < today:
        return EXPIRED
    threshold = today + relativedelta(months=near_months)
    if expiry_date <= threshold:
        return NEAR_EXPIRY
    return VALID
