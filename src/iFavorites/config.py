"""Default configuration values for iFavorites."""

from __future__ import annotations

from typing import Final

# Per-project folder holding the favorites data file and its backups.  It
# sits directly under the project root so the favorites travel with the
# project when it is copied or checked into version control.
WORK_DIR_NAME: Final[str] = ".favorites"
DATA_FILE_NAME: Final[str] = "favorites.json"
BACKUP_DIR_NAME: Final[str] = "backup"

FAVORITES_SCHEMA_ID: Final[str] = "iFavorites/favorites@1"
SETTINGS_SCHEMA_ID: Final[str] = "iFavorites/settings@1"

APP_DIR_NAME: Final[str] = "iFavorites"
SETTINGS_FILE_NAME: Final[str] = "settings.json"

PAGE_LABEL_FORMAT: Final[str] = "Page {current} / {total}"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
