"""
Display and expiry settings.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union


SETTINGS_ENV_VAR = "GS1_SCAN_SETTINGS"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "display_date_format": "%d.%m.%Y",  # nb-NO short date
    "display_labels": {
        "product_code": "GTIN",
        "lot_number": "Lot",
        "expiry_date": "Expires",
        "shipping_container_code": "SSCC",
    },
    "near_expiry_months": 6,
}


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file merged over DEFAULT_SETTINGS.

    Falls back to the GS1_SCAN_SETTINGS environment variable when no path
    is given, and to the defaults when neither is set. Unknown keys are
    ignored.

    Raises:
        ValueError: if the file is not a JSON object, or a value has a
            different type than its default
    """
    path = path or os.getenv(SETTINGS_ENV_VAR, "")
    settings = {
        key: (dict(value) if isinstance(value, dict) else value)
        for key, value in DEFAULT_SETTINGS.items()
    }
    if not path:
        return settings

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    for key, default in DEFAULT_SETTINGS.items():
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass, so compare exact types
        if type(value) is not type(default):
            raise ValueError(
                f"Setting {key!r} must be of type {type(default).__name__}, "
                f"got {type(value).__name__}"
            )
        if isinstance(default, dict):
            if not all(isinstance(label, str) for label in value.values()):
                raise ValueError(f"Setting {key!r} values must be strings")
            settings[key].update(value)
        else:
            settings[key] = value
    return settings
