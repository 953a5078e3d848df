"""
Validation helpers for the GS1 decoder.
"""

from .dates import (
    yymmdd_to_date,
    expiry_status,
    CENTURY_PIVOT,
    EXPIRED,
    NEAR_EXPIRY,
    VALID,
    UNKNOWN,
)

__all__ = [
    "yymmdd_to_date",
    "expiry_status",
    "CENTURY_PIVOT",
    "EXPIRED",
    "NEAR_EXPIRY",
    "VALID",
    "UNKNOWN",
]
