from .base import BaseViewModel
from .favorites_viewmodel import FavoritesViewModel
from .signal import ObservableProperty, Signal

__all__ = ["BaseViewModel", "FavoritesViewModel", "ObservableProperty", "Signal"]
