"""
Scan resolution against a local item catalog.

Resolution order:
1. SSCC (transport label) - rejected, the product itself must be scanned
2. Item by barcode or SKU, using only the GTIN part of GS1 codes
3. Unknown
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core.decoder import ParsedBarcode, decode


logger = logging.getLogger(__name__)

_CATALOG_CACHE: Optional[Dict[str, Any]] = None
_CATALOG_CACHE_PATH: Optional[Path] = None


class ScanKind(str, Enum):
    ITEM = "ITEM"
    SSCC = "SSCC"
    UNKNOWN = "UNKNOWN"


@dataclass
class ScanResolution:
    """Outcome of resolving one scanned string."""
    kind: ScanKind
    parsed: ParsedBarcode
    item: Optional[Dict[str, Any]] = None
    lot: Optional[Dict[str, Any]] = None
    message: str = ""


def load_catalog(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load an item catalog JSON with a small in-process cache.

    Expected shape: {"items": [{"sku": ..., "barcode": ..., "name": ...,
    "lots": [{"lot_number": ..., "quantity": ...,
    "expiry_date": "YYYY-MM-DD"}]}]}

    Raises:
        ValueError: if the file is not valid catalog JSON
    """
    global _CATALOG_CACHE, _CATALOG_CACHE_PATH
    path = Path(path)
    if _CATALOG_CACHE is not None and _CATALOG_CACHE_PATH == path:
        return _CATALOG_CACHE

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid catalog file {path}: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise ValueError(f"Catalog file {path} must contain an 'items' list")

    _CATALOG_CACHE = data
    _CATALOG_CACHE_PATH = path
    return data


def search_code_for(scanned: str, parsed: Optional[ParsedBarcode] = None) -> str:
    """
    Code to search the catalog with.

    GS1 codes are looked up by their GTIN only; anything else by the full
    scanned string.
    """
    parsed = parsed or decode(scanned)
    if parsed.recognized_as_gs1 and parsed.product_code:
        return parsed.product_code
    return scanned


def _find_item(items: List[Dict[str, Any]], code: str) -> Optional[Dict[str, Any]]:
    if not code:
        return None
    for item in items:
        if str(item.get("barcode", "")).strip() == code:
            return item
        if str(item.get("sku", "")).strip() == code:
            return item
    return None


def _find_lot(item: Dict[str, Any], lot_number: str) -> Optional[Dict[str, Any]]:
    """In-stock lot with this number, earliest expiry first (FEFO)."""
    candidates = [
        lot for lot in item.get("lots") or []
        if str(lot.get("lot_number", "")).strip() == lot_number
        and (lot.get("quantity") is None or lot["quantity"] > 0)
    ]
    if not candidates:
        return None
    # ISO dates sort chronologically; lots without expiry go last
    return min(
        candidates,
        key=lambda lot: (lot.get("expiry_date") is None, lot.get("expiry_date") or ""),
    )


def resolve_scan(scanned: str, catalog: Dict[str, Any]) -> ScanResolution:
    """
    Resolve a scanned string to a catalog item.

    Args:
        scanned: Raw scanned string
        catalog: Catalog dict from load_catalog()

    Returns:
        ScanResolution with the matched item (and lot, when the scanned lot
        number is known for that item)
    """
    parsed = decode(scanned)

    if parsed.shipping_container_code:
        return ScanResolution(
            kind=ScanKind.SSCC,
            parsed=parsed,
            message=(
                f"Shipping container code (SSCC: {parsed.shipping_container_code}). "
                "Scan the code on the product, not the transport label."
            ),
        )

    code = search_code_for(scanned, parsed)
    logger.debug("Looking up %r (scanned %r)", code, scanned)
    item = _find_item(catalog.get("items", []), code)

    if item is None:
        return ScanResolution(
            kind=ScanKind.UNKNOWN,
            parsed=parsed,
            message=f"No item found for code: {code}",
        )

    lot = _find_lot(item, parsed.lot_number) if parsed.lot_number else None
    name = item.get("name", code)
    if parsed.recognized_as_gs1:
        message = f"Item found via GS1: {name}"
        if parsed.lot_number:
            message += f" (Lot: {parsed.lot_number})"
    else:
        message = f"Item found: {name}"

    return ScanResolution(
        kind=ScanKind.ITEM,
        parsed=parsed,
        item=item,
        lot=lot,
        message=message,
    )
