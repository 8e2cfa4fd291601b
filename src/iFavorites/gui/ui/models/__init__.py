from .favorites_list_model import FavoriteRoles, FavoritesListModel

__all__ = ["FavoriteRoles", "FavoritesListModel"]
