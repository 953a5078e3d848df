"""
Output formatters for the GS1 scan decoder.
"""

from .display import (
    format_for_display,
    parsed_to_dict,
    format_parsed_json,
)

__all__ = [
    "format_for_display",
    "parsed_to_dict",
    "format_parsed_json",
]
