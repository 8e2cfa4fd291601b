"""JSON schema for the persisted favorites document."""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .config import FAVORITES_SCHEMA_ID
from .errors import FavoritesValidationError

FAVORITES_SCHEMA: dict[str, Any] = {
    "$id": "iFavorites/favorites.schema.json",
    "type": "object",
    "required": ["schema", "pages"],
    "properties": {
        "schema": {"const": FAVORITES_SCHEMA_ID},
        "pages": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["favorites"],
                "properties": {
                    "favorites": {
                        "type": "array",
                        "items": {"type": "string", "minLength": 1},
                    },
                },
                "additionalProperties": True,
            },
        },
        "modified": {"type": "string"},
    },
    "additionalProperties": True,
}

_validator = Draft202012Validator(FAVORITES_SCHEMA)


def validate_favorites(data: Any) -> None:
    """Validate *data* against :data:`FAVORITES_SCHEMA`."""

    try:
        _validator.validate(data)
    except ValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise FavoritesValidationError(f"{location}: {exc.message}") from exc


__all__ = ["FAVORITES_SCHEMA", "validate_favorites"]
