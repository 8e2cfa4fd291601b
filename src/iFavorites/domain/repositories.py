from abc import ABC, abstractmethod

from .models import AssetRef, FavoritesCollection


class IFavoritesRepository(ABC):
    @abstractmethod
    def load(self) -> FavoritesCollection:
        """Return the stored collection, or a fresh one with a single empty page."""
        pass

    @abstractmethod
    def save(self, collection: FavoritesCollection) -> None:
        """Persist a full snapshot of *collection*."""
        pass


class IAssetResolver(ABC):
    @abstractmethod
    def display_name(self, ref: AssetRef) -> str:
        pass

    @abstractmethod
    def is_folder(self, ref: AssetRef) -> bool:
        pass

    @abstractmethod
    def path_of(self, ref: AssetRef) -> str:
        """Host path the presentation layer can navigate to."""
        pass

    @abstractmethod
    def is_valid(self, ref: AssetRef) -> bool:
        """Whether *ref* still points at an existing asset."""
        pass
