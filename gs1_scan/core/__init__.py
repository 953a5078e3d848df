"""
Core decoding modules for the GS1 scan decoder.
"""

from .decoder import (
    decode,
    looks_like_gs1,
    extract_product_code,
    is_shipping_container_code,
    ParsedBarcode,
    FNC1_MARKERS,
)
from .ai_definitions import AI_DEFINITIONS, AIDefinition, LengthRule, ValueKind

__all__ = [
    "decode",
    "looks_like_gs1",
    "extract_product_code",
    "is_shipping_container_code",
    "ParsedBarcode",
    "FNC1_MARKERS",
    "AI_DEFINITIONS",
    "AIDefinition",
    "LengthRule",
    "ValueKind",
]
