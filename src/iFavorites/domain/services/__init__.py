from .favorites_store import FavoritesStore

__all__ = ["FavoritesStore"]
