from .core import AssetRef, FavoritePage, FavoritesCollection

__all__ = ["AssetRef", "FavoritePage", "FavoritesCollection"]
