from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional
import json

from .archive import COMPRESSION_METHODS
from .headers import HEADER_CHECK_MODES
from .map_export import MAP_FORMATS
from .records import DUPLICATE_POLICIES, EXTENSION_MODES

# Default settings path inside Hyacinth/Settings
_HYACINTH_ROOT = Path(__file__).resolve().parents[2]
SETTINGS_DEFAULT_PATH = str(_HYACINTH_ROOT / "Settings" / "zip_settings.json")

SettingsType = Dict[str, Any]

_CHOICES = {
    "duplicate_policy": DUPLICATE_POLICIES,
    "header_check": HEADER_CHECK_MODES,
    "extension_mode": EXTENSION_MODES,
    "compression": tuple(COMPRESSION_METHODS),
    "map_format": MAP_FORMATS,
}


def default_settings() -> SettingsType:
    return {
        "duplicate_policy": "by_original_name",
        "header_check": "first_row",
        "extension_mode": "literal",
        "compression": "deflated",
        "map_format": "csv",
    }


def load_settings(path: Path) -> SettingsType:
    """Read saved settings, falling back to defaults for anything missing or unknown."""
    settings = default_settings()
    if not path.exists():
        return settings
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"WARNING: Ignoring unreadable settings file {path}: {e}")
        return settings
    if not isinstance(data, dict):
        return settings
    for key, allowed in _CHOICES.items():
        if data.get(key) in allowed:
            settings[key] = data[key]
    return settings


def merge_settings(settings: SettingsType, overrides: Dict[str, Optional[str]]) -> SettingsType:
    merged = dict(settings)
    for key, value in overrides.items():
        if value is None:
            continue
        if key not in _CHOICES or value not in _CHOICES[key]:
            raise ValueError(f"Invalid setting {key}={value}")
        merged[key] = value
    return merged


def save_settings(path: Path, settings: SettingsType) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(settings, f, ensure_ascii=False, indent=2)
