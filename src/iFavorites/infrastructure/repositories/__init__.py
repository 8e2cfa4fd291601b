from .json_favorites_repository import JsonFavoritesRepository

__all__ = ["JsonFavoritesRepository"]
