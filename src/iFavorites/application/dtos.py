from dataclasses import dataclass
from enum import Enum
from typing import Union

from iFavorites.domain.models import AssetRef


class PageDirection(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class NavigateAction:
    """Activation target is a folder; show its contents at *path*."""
    path: str


@dataclass(frozen=True)
class SelectAction:
    """Activation target is a leaf asset; select it in the host."""
    ref: AssetRef


@dataclass(frozen=True)
class UnavailableAction:
    """The bookmarked asset no longer resolves."""
    ref: AssetRef


ActivationResult = Union[NavigateAction, SelectAction, UnavailableAction]


@dataclass(frozen=True)
class FavoriteItem:
    """Presentation row for one favorite of the current page."""
    ref: AssetRef
    display_name: str
    path: str
    is_folder: bool
    is_valid: bool
