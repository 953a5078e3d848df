"""
GS1 Scan Decoder

Decodes GS1 Application Identifier strings scanned from laboratory supplies
(GS1-128, GS1 DataMatrix, keyboard entry) into product code (GTIN), lot
number, expiry date and shipping container code (SSCC).
"""

from .core.decoder import (
    decode,
    looks_like_gs1,
    extract_product_code,
    is_shipping_container_code,
    ParsedBarcode,
)
from .core.ai_definitions import AI_DEFINITIONS, AIDefinition, LengthRule, ValueKind
from .validators.dates import yymmdd_to_date, expiry_status
from .formatters.display import (
    format_for_display,
    parsed_to_dict,
    format_parsed_json,
)
from .settings import DEFAULT_SETTINGS, load_settings
from .lookup import (
    load_catalog,
    resolve_scan,
    search_code_for,
    ScanKind,
    ScanResolution,
)

__version__ = "1.0.0"
__all__ = [
    "decode",
    "looks_like_gs1",
    "extract_product_code",
    "is_shipping_container_code",
    "ParsedBarcode",
    "AI_DEFINITIONS",
    "AIDefinition",
    "LengthRule",
    "ValueKind",
    "yymmdd_to_date",
    "expiry_status",
    "format_for_display",
    "parsed_to_dict",
    "format_parsed_json",
    "DEFAULT_SETTINGS",
    "load_settings",
    "load_catalog",
    "resolve_scan",
    "search_code_for",
    "ScanKind",
    "ScanResolution",
]
