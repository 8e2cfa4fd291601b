"""Schema helpers for the application settings file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_LOG_LEVEL, LOG_LEVELS, SETTINGS_SCHEMA_ID

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "iFavorites/settings.schema.json",
    "type": "object",
    "required": ["schema", "ui", "log_level"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "data_path": {"type": ["string", "null"]},
        "log_level": {"type": "string", "enum": list(LOG_LEVELS)},
        "ui": {
            "type": "object",
            "properties": {
                "reveal_folders": {"type": "boolean"},
                "confirm_page_delete": {"type": "boolean"},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "data_path": None,
    "log_level": DEFAULT_LOG_LEVEL,
    "ui": {
        "reveal_folders": True,
        "confirm_page_delete": True,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "ui" and isinstance(value, dict):
                merged.setdefault("ui", {}).update(value)
                continue
            if key == "log_level" and isinstance(value, str):
                merged[key] = value.upper()
                continue
            if key == "data_path":
                if value in {None, ""}:
                    merged[key] = None
                    continue
                try:
                    merged[key] = os.fspath(value)
                except TypeError:
                    continue
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
