"""
CLI interface for the GS1 scan decoder.

Usage:
    python -m gs1_scan "<scanned code>" [options]

Options:
    --json                Output as JSON
    --raw-values          Include raw YYMMDD values in JSON dates
    --settings PATH       Settings JSON (default: $GS1_SCAN_SETTINGS)
    --catalog PATH        Resolve the scan against an item catalog JSON
    -v, --verbose         Debug logging
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional

from .core.decoder import ParsedBarcode, decode
from .formatters.display import format_for_display, format_parsed_json, parsed_to_dict
from .lookup import ScanResolution, load_catalog, resolve_scan
from .settings import load_settings
from .validators.dates import expiry_status


def format_result(
    parsed: ParsedBarcode,
    settings: Dict[str, Any],
    resolution: Optional[ScanResolution] = None,
) -> str:
    """Format decode result for display."""
    lines = [
        "=" * 60,
        "GS1 Decode Result",
        "=" * 60,
        f"Raw Input: {parsed.raw_input!r}",
        f"Recognized as GS1: {parsed.recognized_as_gs1}",
    ]

    if parsed.recognized_as_gs1:
        lines.extend([
            f"Summary: {format_for_display(parsed, settings)}",
            "",
            "Identifiers:",
            "-" * 40,
        ])
        for ai, value in parsed.identifiers.items():
            lines.append(f"  AI({ai}): {value!r}")
        lines.append("")

    if parsed.expiry_date:
        status = expiry_status(parsed.expiry_date, settings["near_expiry_months"])
        lines.append(f"Expiry Status: {status}")

    if resolution is not None:
        lines.append(f"Lookup: [{resolution.kind.value}] {resolution.message}")

    return "\n".join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="gs1_scan",
        description="Decode GS1 Application Identifier strings from scanned barcodes",
    )

    parser.add_argument(
        "code",
        help="Scanned code to decode",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output result as JSON",
    )

    parser.add_argument(
        "--raw-values",
        action="store_true",
        help="Include raw YYMMDD values alongside formatted dates (JSON only)",
    )

    parser.add_argument(
        "--settings",
        default=None,
        help="Path to settings JSON (defaults to $GS1_SCAN_SETTINGS)",
    )

    parser.add_argument(
        "--catalog",
        default=None,
        help="Path to item catalog JSON to resolve the scan against",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args.settings)
        catalog = load_catalog(args.catalog) if args.catalog else None
    except (OSError, ValueError) as e:
        error_output = {
            "error": str(e),
            "input": args.code,
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        return 2

    parsed = decode(args.code)
    resolution = resolve_scan(args.code, catalog) if catalog is not None else None

    if args.json:
        output = parsed_to_dict(parsed)
        output["fields"] = json.loads(
            format_parsed_json(parsed, include_raw_values=args.raw_values)
        )
        if parsed.expiry_date:
            output["expiry_status"] = expiry_status(
                parsed.expiry_date, settings["near_expiry_months"]
            )
        if resolution is not None:
            output["lookup"] = {
                "kind": resolution.kind.value,
                "message": resolution.message,
                "item": resolution.item,
                "lot": resolution.lot,
            }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(format_result(parsed, settings, resolution))

    return 0 if parsed.recognized_as_gs1 else 1


if __name__ == "__main__":
    sys.exit(main())
