"""
Application Identifier definitions for the GS1 decoder.

Covers the AIs that appear on laboratory supplies:
- (00) SSCC - Serial Shipping Container Code (logistics label)
- (01) GTIN - Global Trade Item Number (product code)
- (10) Lot/Batch number
- (17) Expiry date (YYMMDD)
- (21) Serial number
- (30) Variable count

Reference: https://ref.gs1.org/ai/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class ValueKind(str, Enum):
    """Kind of data carried by an AI."""
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"
    DATE = "date"


@dataclass(frozen=True)
class LengthRule:
    """
    Data length of an AI.

    Fixed-length AIs have ``fixed`` set and ``min_length == max_length``.
    Variable-length AIs leave ``fixed`` as None and need a delimiter search.
    """
    min_length: int
    max_length: int
    fixed: Optional[int] = None

    @classmethod
    def fixed_length(cls, n: int) -> "LengthRule":
        return cls(min_length=n, max_length=n, fixed=n)

    @classmethod
    def variable(cls, min_length: int, max_length: int) -> "LengthRule":
        return cls(min_length=min_length, max_length=max_length)

    @property
    def is_fixed(self) -> bool:
        return self.fixed is not None


@dataclass(frozen=True)
class AIDefinition:
    """
    Represents a single GS1 Application Identifier.

    Attributes:
        code: The Application Identifier code (2-4 digits)
        display_name: Human-readable name
        length: Fixed or variable length rule for the data that follows
        value_kind: Numeric, alphanumeric or date
    """
    code: str
    display_name: str
    length: LengthRule
    value_kind: ValueKind


def _build_table(*entries: AIDefinition) -> Mapping[str, AIDefinition]:
    table = {}
    for entry in entries:
        if entry.code in table:
            raise ValueError(f"Duplicate AI definition: {entry.code}")
        table[entry.code] = entry
    return MappingProxyType(table)


AI_DEFINITIONS: Mapping[str, AIDefinition] = _build_table(
    AIDefinition("00", "SSCC", LengthRule.fixed_length(18), ValueKind.NUMERIC),
    AIDefinition("01", "GTIN", LengthRule.fixed_length(14), ValueKind.NUMERIC),
    AIDefinition("10", "Lot/Batch", LengthRule.variable(1, 20), ValueKind.ALPHANUMERIC),
    AIDefinition("17", "Expiry Date", LengthRule.fixed_length(6), ValueKind.DATE),
    AIDefinition("21", "Serial Number", LengthRule.variable(1, 20), ValueKind.ALPHANUMERIC),
    AIDefinition("30", "Quantity", LengthRule.variable(1, 8), ValueKind.NUMERIC),
)

# Longest AI code the decoder will try against the table
MAX_AI_LENGTH = 4
