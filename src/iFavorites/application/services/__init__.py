from .favorites_controller import FavoritesController
from .favorites_session import FavoritesSession

__all__ = ["FavoritesController", "FavoritesSession"]
