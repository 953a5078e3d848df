"""
GS1 Application Identifier decoder

Decodes scanned GS1-128 / GS1 DataMatrix strings (bracketed "(01)..." form,
bare digit form, or with FNC1 stand-ins from the scanner firmware) into the
fields used when receiving laboratory supplies.

Key rules:
- Fixed-length AIs take exactly their length (best effort on short input)
- Variable-length AIs end where the next AI appears, found by a forward scan
  over the allowed length range, or at end of string
- Malformed data is skipped, never raised
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from .ai_definitions import AI_DEFINITIONS, MAX_AI_LENGTH
from ..validators.dates import yymmdd_to_date


logger = logging.getLogger(__name__)

# Textual FNC1 representations emitted by scanners (GS1-128 and DataMatrix)
FNC1_MARKERS = ("]C1", "]d2")

_PAREN_AI = re.compile(r"\(([0-9]{2,4})\)")
_LEADING_PAREN_AI = re.compile(r"\([0-9]{2}\)")
_LEADING_DIGITS = re.compile(r"[0-9]{2}[0-9]+")
_DIGIT_PAIR = re.compile(r"[0-9]{2}")
_DIGITS = re.compile(r"[0-9]+")

# AI code -> named field on ParsedBarcode
PRODUCT_CODE_AI = "01"
LOT_NUMBER_AI = "10"
EXPIRY_DATE_AI = "17"
SHIPPING_CONTAINER_AI = "00"


@dataclass(frozen=True)
class ParsedBarcode:
    """
    Result of decoding a scanned string.

    Attributes:
        raw_input: Original input string, unmodified
        recognized_as_gs1: True if the input looked like a GS1 string
        product_code: GTIN from AI (01)
        lot_number: Lot/batch from AI (10)
        expiry_date: Expiry date from AI (17), only if it converted
        shipping_container_code: SSCC from AI (00)
        identifiers: Every recognized AI -> raw data, in order found
    """
    raw_input: str
    recognized_as_gs1: bool = False
    product_code: Optional[str] = None
    lot_number: Optional[str] = None
    expiry_date: Optional[date] = None
    shipping_container_code: Optional[str] = None
    identifiers: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )


def looks_like_gs1(code: str) -> bool:
    """
    Check whether a string may be a GS1 element string.

    Loose by intent: any string starting with three digits qualifies.
    """
    if not code:
        return False
    return (
        any(marker in code for marker in FNC1_MARKERS)
        or _LEADING_PAREN_AI.match(code) is not None
        or _LEADING_DIGITS.match(code) is not None
    )


def _strip_fnc1(code: str) -> str:
    for marker in FNC1_MARKERS:
        code = code.replace(marker, "")
    return code.strip()


def _match_table_ai(text: str, pos: int) -> Optional[str]:
    """Bare AI at pos: 2-digit codes first, then 3 and 4 digits."""
    for width in range(2, MAX_AI_LENGTH + 1):
        candidate = text[pos:pos + width]
        if len(candidate) < width or not _DIGITS.fullmatch(candidate):
            return None
        if candidate in AI_DEFINITIONS:
            return candidate
    return None


def _match_ai(text: str, pos: int) -> Optional[Tuple[str, int]]:
    """
    Identify an AI at pos.

    Returns (ai_code, token_length) or None. Parenthesized codes are returned
    even when they are not in the table.
    """
    if text[pos] == "(":
        match = _PAREN_AI.match(text, pos)
        if match:
            return match.group(1), match.end() - pos
        return None

    ai = _match_table_ai(text, pos)
    if ai:
        return ai, len(ai)
    return None


def _is_boundary(text: str, pos: int) -> bool:
    """True if another AI starts at pos (bracketed, or bare followed by data)."""
    if text[pos] == "(":
        return _PAREN_AI.match(text, pos) is not None
    ai = _match_table_ai(text, pos)
    if ai is None:
        return False
    after = pos + len(ai)
    return _DIGITS.match(text, after) is not None


def _find_variable_end(text: str, start: int, min_length: int, max_length: int) -> int:
    for offset in range(min_length, max_length + 1):
        pos = start + offset
        if pos >= len(text):
            break
        if _is_boundary(text, pos):
            return pos
    return len(text)


def decode(code: str) -> ParsedBarcode:
    """
    Decode a scanned string into GS1 fields.

    Never raises for malformed input: unrecognized characters are skipped,
    out-of-range variable fields are dropped and invalid dates leave
    ``expiry_date`` unset while the raw value is still kept in
    ``identifiers``.

    Args:
        code: Raw scanned string

    Returns:
        ParsedBarcode; ``recognized_as_gs1`` is False for non-GS1 input

    Example:
        >>> parsed = decode("(01)12345678901234(17)261231(10)LOTABC123")
        >>> parsed.product_code, parsed.lot_number
        ('12345678901234', 'LOTABC123')
    """
    if not looks_like_gs1(code):
        return ParsedBarcode(raw_input=code)

    text = _strip_fnc1(code)
    identifiers: Dict[str, str] = {}
    fields: Dict[str, object] = {}

    position = 0
    while position < len(text):
        token = _match_ai(text, position)

        if token is None:
            if _DIGIT_PAIR.match(text, position):
                logger.debug("Skipping unrecognized AI at index %d in %r", position, text)
                position += 1
                continue
            break

        ai, token_length = token
        definition = AI_DEFINITIONS.get(ai)
        if definition is None:
            logger.debug("Skipping unknown AI (%s) at index %d", ai, position)
            position += token_length
            continue

        start = position + token_length
        rule = definition.length

        if rule.is_fixed:
            data = text[start:start + rule.fixed]
            if len(data) < rule.fixed:
                logger.debug("Truncated data for AI (%s): %r", ai, data)
            position = start + rule.fixed
        else:
            end = _find_variable_end(text, start, rule.min_length, rule.max_length)
            data = text[start:end]
            if not rule.min_length <= len(data) <= rule.max_length:
                logger.debug(
                    "Rejecting AI (%s) at index %d: length %d outside %d..%d",
                    ai, position, len(data), rule.min_length, rule.max_length,
                )
                position = start + 1
                continue
            position = end

        identifiers[ai] = data

        if ai == PRODUCT_CODE_AI:
            fields["product_code"] = data
        elif ai == LOT_NUMBER_AI:
            fields["lot_number"] = data
        elif ai == EXPIRY_DATE_AI:
            expiry = yymmdd_to_date(data)
            if expiry is not None:
                fields["expiry_date"] = expiry
            else:
                logger.debug("Invalid expiry date for AI (17): %r", data)
        elif ai == SHIPPING_CONTAINER_AI:
            fields["shipping_container_code"] = data

    return ParsedBarcode(
        raw_input=code,
        recognized_as_gs1=True,
        identifiers=MappingProxyType(identifiers),
        **fields,
    )


def extract_product_code(code: str) -> Optional[str]:
    """
    Extract the GTIN from a scanned code for catalog lookup.

    Returns only the GTIN part, not the full GS1 string.
    """
    return decode(code).product_code or None


def is_shipping_container_code(code: str) -> bool:
    """Check if a scanned code carries an SSCC (logistics label)."""
    return bool(decode(code).shipping_container_code)
