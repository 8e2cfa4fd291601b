from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from iFavorites.utils.pathutils import escapes_root, normalise_ref_path


@dataclass(frozen=True, order=True)
class AssetRef:
    """Identity of a bookmarked asset: its project-relative POSIX path."""

    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalise_ref_path(self.path))

    def is_valid(self) -> bool:
        return bool(self.path) and not escapes_root(self.path)

    def __str__(self) -> str:
        return self.path


@dataclass
class FavoritePage:
    favorites: List[AssetRef] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.favorites)

    def __iter__(self) -> Iterator[AssetRef]:
        return iter(self.favorites)

    def __contains__(self, item: object) -> bool:
        return item in self.favorites

    def as_tuple(self) -> Tuple[AssetRef, ...]:
        return tuple(self.favorites)

    def copy(self) -> FavoritePage:
        return FavoritePage(list(self.favorites))


@dataclass
class FavoritesCollection:
    """Ordered, never-empty list of pages plus the unsaved-changes marker."""

    pages: List[FavoritePage] = field(default_factory=list)
    dirty: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        if not self.pages:
            self.pages.append(FavoritePage())

    @classmethod
    def create(cls) -> FavoritesCollection:
        return cls([FavoritePage()])

    @classmethod
    def from_entries(cls, pages: Iterable[Iterable[AssetRef]]) -> FavoritesCollection:
        """Build a collection from persisted page contents.

        Invalid refs (empty, or climbing out of the project) and duplicates
        inside a page are dropped, the first occurrence winning. An empty
        page list becomes a single empty page. Any repair marks the
        collection dirty so the cleaned data gets written back.
        """

        repaired = False
        built: List[FavoritePage] = []
        for entries in pages:
            page = FavoritePage()
            for ref in entries:
                if not ref.is_valid() or ref in page:
                    repaired = True
                    continue
                page.favorites.append(ref)
            built.append(page)
        if not built:
            built.append(FavoritePage())
            repaired = True
        return cls(built, dirty=repaired)

    def mark_dirty(self) -> None:
        self.dirty = True

    def copy(self) -> FavoritesCollection:
        return FavoritesCollection([page.copy() for page in self.pages], dirty=self.dirty)

    def to_entries(self) -> List[List[str]]:
        return [[ref.path for ref in page] for page in self.pages]
