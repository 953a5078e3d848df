"""
Output formatting for decoded barcodes.

- One-line display string for scan feedback (" | " separated)
- JSON-safe dict of the full result
- JSON with human-readable field names, dates as dd/mm/yyyy
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.ai_definitions import AI_DEFINITIONS, ValueKind
from ..core.decoder import ParsedBarcode
from ..settings import DEFAULT_SETTINGS
from ..validators.dates import yymmdd_to_date


# Display order of the named fields
DISPLAY_FIELDS = (
    "product_code",
    "lot_number",
    "expiry_date",
    "shipping_container_code",
)


def format_for_display(
    parsed: ParsedBarcode,
    settings: Optional[Dict[str, Any]] = None,
) -> str:
    """
    Format a decoded barcode for display.

    Non-GS1 input is returned verbatim. Absent fields are left out.

    Example:
        >>> format_for_display(decode("(01)12345678901234(17)261231"))
        'GTIN: 12345678901234 | Expires: 31.12.2026'
    """
    if not parsed.recognized_as_gs1:
        return parsed.raw_input

    settings = settings or DEFAULT_SETTINGS
    labels = {**DEFAULT_SETTINGS["display_labels"], **settings.get("display_labels", {})}
    date_format = settings.get("display_date_format", DEFAULT_SETTINGS["display_date_format"])

    parts = []
    for name in DISPLAY_FIELDS:
        value = getattr(parsed, name)
        if not value:
            continue
        if name == "expiry_date":
            value = value.strftime(date_format)
        parts.append(f"{labels[name]}: {value}")

    return " | ".join(parts)


def parsed_to_dict(parsed: ParsedBarcode) -> Dict[str, Any]:
    """Convert to a JSON-safe dictionary."""
    return {
        "raw": parsed.raw_input,
        "is_gs1": parsed.recognized_as_gs1,
        "product_code": parsed.product_code,
        "lot_number": parsed.lot_number,
        "expiry_date": parsed.expiry_date.isoformat() if parsed.expiry_date else None,
        "shipping_container_code": parsed.shipping_container_code,
        "identifiers": dict(parsed.identifiers),
    }


def format_parsed_json(
    parsed: ParsedBarcode,
    include_raw_values: bool = False,
) -> str:
    """
    Format identifiers as JSON keyed by human-readable field names.

    Args:
        parsed: Result from decode()
        include_raw_values: For dates, include the raw YYMMDD alongside the
            formatted value

    Returns:
        JSON string, e.g. {"GTIN": "12345678901234", "Expiry Date": "31/12/2026"}
    """
    output: Dict[str, Any] = {}

    for ai, raw_value in parsed.identifiers.items():
        definition = AI_DEFINITIONS.get(ai)
        field_name = definition.display_name if definition else f"AI({ai})"

        value: Any = raw_value
        if definition and definition.value_kind == ValueKind.DATE:
            converted = yymmdd_to_date(raw_value)
            formatted = converted.strftime("%d/%m/%Y") if converted else raw_value
            value = {"formatted": formatted, "raw": raw_value} if include_raw_values else formatted

        output[field_name] = value

    return json.dumps(output, ensure_ascii=False, indent=2)
