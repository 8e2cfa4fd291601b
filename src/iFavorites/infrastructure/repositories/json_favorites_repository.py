import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from iFavorites.config import BACKUP_DIR_NAME, FAVORITES_SCHEMA_ID
from iFavorites.domain.models import AssetRef, FavoritesCollection
from iFavorites.domain.repositories import IFavoritesRepository
from iFavorites.errors import FavoritesLoadError, FavoritesSaveError
from iFavorites.schemas import validate_favorites
from iFavorites.utils.jsonio import read_json, write_json

_logger = logging.getLogger(__name__)


class JsonFavoritesRepository(IFavoritesRepository):
    """Store the favorites collection as a schema-validated JSON document."""

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> FavoritesCollection:
        if not self._path.exists():
            _logger.info("No favorites at %s; starting with an empty page", self._path)
            collection = FavoritesCollection.create()
            # Persisted on the first flush
            collection.mark_dirty()
            return collection

        if not self._path.is_file():
            raise FavoritesLoadError(f"Favorites path is not a file: {self._path}")

        payload = read_json(self._path)
        validate_favorites(payload)
        collection = FavoritesCollection.from_entries(
            (AssetRef(entry) for entry in page["favorites"]) for page in payload["pages"]
        )
        if collection.dirty:
            _logger.warning("Repaired favorites data in %s", self._path)
        return collection

    def save(self, collection: FavoritesCollection) -> None:
        payload = self._to_payload(collection)
        validate_favorites(payload)
        try:
            write_json(self._path, payload, backup_dir=self._path.parent / BACKUP_DIR_NAME)
        except OSError as exc:
            raise FavoritesSaveError(f"Could not write {self._path}: {exc}") from exc
        _logger.debug("Wrote %s", self._path)

    @staticmethod
    def _to_payload(collection: FavoritesCollection) -> Dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        return {
            "schema": FAVORITES_SCHEMA_ID,
            "pages": [{"favorites": entries} for entries in collection.to_entries()],
            "modified": now,
        }
